from .services.llm import TextGenerator, generate_text


def get_text_generator() -> TextGenerator:
    """
    The text-generation backend used by the refine endpoint.
    Tests swap it through app.dependency_overrides.
    """
    return generate_text
