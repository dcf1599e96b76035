"""Prompt templates for product imagery and copy."""

from .models import FieldType, ImageOptions

ANALYZE_PRODUCT_PROMPT = """Analyze this product image and provide the following information in JSON format:
{
  "name": "A catchy, SEO-friendly product name (3-8 words)",
  "description": "A detailed product description for e-commerce (2-3 sentences, highlight features and benefits)",
  "suggestedPrice": "Suggested retail price range in USD (e.g., '$25-$35')",
  "category": "Product category (e.g., 'Apparel', 'Electronics', 'Home Goods')",
  "tags": ["tag1", "tag2", "tag3", "tag4", "tag5"],
  "features": ["feature1", "feature2", "feature3"]
}

Make it compelling and suitable for an online store. Focus on what makes this product appealing."""

OPTIMIZE_PROMPTS: dict[FieldType, str] = {
    FieldType.NAME: (
        "Improve this product name to be more catchy, SEO-friendly, and appealing "
        'for e-commerce. Keep it concise (3-8 words). Original: "{text}"\n\n'
        "Return only the improved product name, nothing else."
    ),
    FieldType.DESCRIPTION: (
        "Improve this product description for e-commerce. Make it more compelling, "
        "highlight benefits, and optimize for conversions. Keep it concise "
        '(2-4 sentences). Original: "{text}"\n\n'
        "Return only the improved description, nothing else."
    ),
    FieldType.TAGS: (
        "Improve this list of product tags/keywords for better SEO and "
        'discoverability. Original: "{text}"\n\n'
        "Return only the improved comma-separated tags, nothing else."
    ),
    FieldType.DEFAULT: (
        "Improve and optimize this e-commerce content to be more professional "
        'and compelling: "{text}"\n\n'
        "Return only the improved text, nothing else."
    ),
}

# Styles used for multi-shot generation, in order.
VARIATION_STYLES: tuple[ImageOptions, ...] = (
    ImageOptions(background="pure white background", angle="front view"),
    ImageOptions(background="subtle gradient background", angle="45 degree angle"),
    ImageOptions(background="lifestyle setting", angle="slight side angle"),
)


def build_product_prompt(user_prompt: str, options: ImageOptions | None = None) -> str:
    """Wrap a short product description in e-commerce photo requirements."""
    options = options or ImageOptions()
    return f"""Generate a {options.style} image of: {user_prompt}.

Requirements:
- Background: {options.background}
- Lighting: {options.lighting}
- Camera angle: {options.angle}
- Quality: {options.quality}
- No text or watermarks
- Professional e-commerce product shot
- Clean and minimal composition
- Suitable for online store listing

Generate only the image, no text descriptions."""


def build_optimize_prompt(text: str, field_type: FieldType = FieldType.DESCRIPTION) -> str:
    template = OPTIMIZE_PROMPTS.get(field_type, OPTIMIZE_PROMPTS[FieldType.DEFAULT])
    return template.format(text=text)
