from typing import Dict, List
from .models import PresetCategory, PresetCategoryId, PresetOption

# Aspect ratios carry a literal value; every other category carries a prompt fragment.
PRESET_CATEGORIES: List[PresetCategory] = [
    PresetCategory(
        id=PresetCategoryId.ASPECT_RATIOS,
        name="Aspect Ratio",
        icon="⬜",
        presets=[
            PresetOption(id="ar-1-1", label="1:1", value="1:1", description="Square, social media posts and profile images"),
            PresetOption(id="ar-16-9", label="16:9", value="16:9", description="Widescreen, cinematic and desktop wallpapers"),
            PresetOption(id="ar-9-16", label="9:16", value="9:16", description="Vertical, phone wallpapers, stories and reels"),
            PresetOption(id="ar-4-3", label="4:3", value="4:3", description="Classic, traditional photography and prints"),
            PresetOption(id="ar-3-2", label="3:2", value="3:2", description="Standard photo, DSLR native ratio"),
            PresetOption(id="ar-21-9", label="21:9", value="21:9", description="Ultra-wide cinematic panoramas"),
            PresetOption(id="ar-2-3", label="2:3", value="2:3", description="Portrait, magazine covers and posters"),
        ],
    ),
    PresetCategory(
        id=PresetCategoryId.LIGHTING,
        name="Lighting",
        icon="💡",
        presets=[
            PresetOption(id="lt-golden", label="Golden Hour", prompt_fragment="golden hour lighting", description="Warm sunset/sunrise glow with long shadows"),
            PresetOption(id="lt-studio", label="Studio", prompt_fragment="studio lighting", description="Controlled, professional three-point lighting"),
            PresetOption(id="lt-neon", label="Neon", prompt_fragment="neon lighting", description="Vibrant cyberpunk-style neon glow"),
            PresetOption(id="lt-natural", label="Natural", prompt_fragment="natural lighting", description="Soft, ambient daylight"),
            PresetOption(id="lt-dramatic", label="Dramatic", prompt_fragment="dramatic chiaroscuro lighting", description="High contrast light and shadow in the style of Caravaggio"),
            PresetOption(id="lt-backlit", label="Backlit", prompt_fragment="backlit silhouette", description="Subject illuminated from behind, rim light effect"),
            PresetOption(id="lt-volumetric", label="Volumetric", prompt_fragment="volumetric lighting", description="God rays, visible light beams through atmosphere"),
            PresetOption(id="lt-moonlight", label="Moonlight", prompt_fragment="soft moonlight", description="Cool, ethereal nighttime illumination"),
        ],
    ),
    PresetCategory(
        id=PresetCategoryId.CAMERAS,
        name="Camera + Lens",
        icon="📷",
        presets=[
            PresetOption(id="cl-35mm", label="35mm", prompt_fragment="35mm lens", description="Versatile street photography focal length"),
            PresetOption(id="cl-50mm", label="50mm", prompt_fragment="50mm lens", description='Natural perspective, the "nifty fifty"'),
            PresetOption(id="cl-85mm", label="85mm", prompt_fragment="85mm portrait lens", description="Classic portrait lens with beautiful bokeh"),
            PresetOption(id="cl-wide", label="Wide Angle", prompt_fragment="24mm wide angle lens", description="Expansive field of view, architectural shots"),
            PresetOption(id="cl-macro", label="Macro", prompt_fragment="macro lens extreme close-up", description="Extreme close-up detail photography"),
            PresetOption(id="cl-tele", label="Telephoto", prompt_fragment="200mm telephoto lens", description="Compressed perspective, distant subjects"),
            PresetOption(id="cl-fisheye", label="Fisheye", prompt_fragment="fisheye lens distortion", description="Ultra-wide barrel distortion effect"),
            PresetOption(id="cl-tiltshift", label="Tilt-Shift", prompt_fragment="tilt-shift lens miniature effect", description="Selective focus creating miniature effect"),
        ],
    ),
    PresetCategory(
        id=PresetCategoryId.FILM_STOCKS,
        name="Film Stock",
        icon="🎞️",
        presets=[
            PresetOption(id="fs-portra", label="Portra 400", prompt_fragment="Kodak Portra 400 film", description="Warm skin tones, fine grain, portrait favorite"),
            PresetOption(id="fs-ektar", label="Ektar 100", prompt_fragment="Kodak Ektar 100 film", description="Vivid colors, ultra-fine grain, high saturation"),
            PresetOption(id="fs-hp5", label="HP5 Plus", prompt_fragment="Ilford HP5 Plus black and white film", description="Classic B&W with rich tonal range"),
            PresetOption(id="fs-velvia", label="Velvia 50", prompt_fragment="Fujifilm Velvia 50 slide film", description="Intense color saturation, landscape favorite"),
            PresetOption(id="fs-cinestill", label="CineStill 800T", prompt_fragment="CineStill 800T tungsten film", description="Cinematic halation glow around highlights"),
            PresetOption(id="fs-trix", label="Tri-X 400", prompt_fragment="Kodak Tri-X 400 black and white", description="Gritty B&W, classic photojournalism look"),
            PresetOption(id="fs-superia", label="Superia 400", prompt_fragment="Fujifilm Superia 400", description="Cool greens, everyday color negative film"),
        ],
    ),
    PresetCategory(
        id=PresetCategoryId.ATMOSPHERES,
        name="Atmosphere",
        icon="🌫️",
        presets=[
            PresetOption(id="at-foggy", label="Foggy", prompt_fragment="foggy misty atmosphere", description="Dense fog creating depth and mystery"),
            PresetOption(id="at-rain", label="Rainy", prompt_fragment="rainy wet reflections", description="Rain-soaked with reflective wet surfaces"),
            PresetOption(id="at-dusty", label="Dusty", prompt_fragment="dusty hazy particles", description="Atmospheric dust particles catching light"),
            PresetOption(id="at-smoke", label="Smoky", prompt_fragment="smoky atmospheric haze", description="Wisps of smoke adding texture and mood"),
            PresetOption(id="at-clear", label="Crystal Clear", prompt_fragment="crystal clear atmosphere", description="Sharp visibility, vivid and clean"),
            PresetOption(id="at-snow", label="Snowy", prompt_fragment="falling snow blizzard", description="Snowfall adding winter atmosphere"),
            PresetOption(id="at-underwater", label="Underwater", prompt_fragment="underwater caustics", description="Submerged with light caustics and bubbles"),
        ],
    ),
    PresetCategory(
        id=PresetCategoryId.ART_STYLES,
        name="Art Style",
        icon="🎨",
        presets=[
            PresetOption(id="as-photo", label="Photorealistic", prompt_fragment="photorealistic", description="Indistinguishable from a real photograph"),
            PresetOption(id="as-oil", label="Oil Painting", prompt_fragment="oil painting style", description="Rich textures with visible brushstrokes"),
            PresetOption(id="as-watercolor", label="Watercolor", prompt_fragment="watercolor painting", description="Soft, translucent washes of color"),
            PresetOption(id="as-3d", label="3D Render", prompt_fragment="3D render octane", description="Clean CG render with global illumination"),
            PresetOption(id="as-anime", label="Anime", prompt_fragment="anime art style", description="Japanese animation-inspired aesthetic"),
            PresetOption(id="as-comic", label="Comic Book", prompt_fragment="comic book illustration", description="Bold lines, halftone dots, vivid panels"),
            PresetOption(id="as-pixel", label="Pixel Art", prompt_fragment="pixel art retro", description="Retro 8-bit or 16-bit game aesthetic"),
            PresetOption(id="as-concept", label="Concept Art", prompt_fragment="concept art illustration", description="Professional concept art for games and film"),
        ],
    ),
    PresetCategory(
        id=PresetCategoryId.COMPOSITIONS,
        name="Composition",
        icon="📐",
        presets=[
            PresetOption(id="cp-ruleofthirds", label="Rule of Thirds", prompt_fragment="rule of thirds composition", description="Subject placed at intersection points"),
            PresetOption(id="cp-centered", label="Centered", prompt_fragment="centered symmetrical composition", description="Subject dead center, symmetrical balance"),
            PresetOption(id="cp-leading", label="Leading Lines", prompt_fragment="leading lines composition", description="Lines drawing the eye to the subject"),
            PresetOption(id="cp-closeup", label="Close-Up", prompt_fragment="extreme close-up", description="Tight framing on subject detail"),
            PresetOption(id="cp-birds", label="Bird's Eye", prompt_fragment="bird's eye view overhead", description="Directly overhead, looking straight down"),
            PresetOption(id="cp-worms", label="Worm's Eye", prompt_fragment="worm's eye view low angle", description="Looking up from ground level"),
            PresetOption(id="cp-dutch", label="Dutch Angle", prompt_fragment="dutch angle tilted", description="Tilted camera for dynamic tension"),
            PresetOption(id="cp-negative", label="Negative Space", prompt_fragment="negative space minimal composition", description="Large empty areas emphasizing the subject"),
        ],
    ),
    PresetCategory(
        id=PresetCategoryId.COLOR_PALETTES,
        name="Color Palette",
        icon="🎭",
        presets=[
            PresetOption(id="co-warm", label="Warm Tones", prompt_fragment="warm color palette reds oranges", description="Reds, oranges, and golds"),
            PresetOption(id="co-cool", label="Cool Tones", prompt_fragment="cool color palette blues teals", description="Blues, teals, and purples"),
            PresetOption(id="co-mono", label="Monochrome", prompt_fragment="monochrome single color", description="Single color in varying shades"),
            PresetOption(id="co-pastel", label="Pastel", prompt_fragment="soft pastel colors", description="Soft, muted, light colors"),
            PresetOption(id="co-neon", label="Neon", prompt_fragment="neon vibrant electric colors", description="Electric, high-saturation vibrant tones"),
            PresetOption(id="co-earth", label="Earthy", prompt_fragment="earth tones natural browns greens", description="Natural browns, greens, and tans"),
            PresetOption(id="co-bw", label="Black & White", prompt_fragment="black and white high contrast", description="No color, pure tonal contrast"),
            PresetOption(id="co-vintage", label="Vintage", prompt_fragment="vintage muted desaturated", description="Faded, desaturated retro color grading"),
        ],
    ),
]

PRESETS_BY_CATEGORY: Dict[PresetCategoryId, Dict[str, PresetOption]] = {
    category.id: {option.id: option for option in category.presets} for category in PRESET_CATEGORIES
}
