"""Predefined templates offered when a user starts a new template.

Each builder returns a fresh Template record whose layout carries newly
generated element ids, so two templates created from the same entry never
share element ids.
"""

import logging
from typing import Callable

from schemas.element import ElementType
from schemas.layout import TemplateLayout
from schemas.template import Template

from .elements import create_element
from .operations import create_empty_layout, replace_elements

logger = logging.getLogger(__name__)

TEMPLATE_TYPE_BLOG = "Blog Post"
TEMPLATE_TYPE_PHOTO_GALLERY = "Photo Gallery"
TEMPLATE_TYPE_ARTICLE = "Article"
TEMPLATE_TYPE_TUTORIAL = "Tutorial"
TEMPLATE_TYPE_QUOTE = "Quote"

CONTENT_X = 50
CONTENT_WIDTH = 600


def _text(element_type, y, height, z_index, text, x=CONTENT_X, width=CONTENT_WIDTH):
    return create_element(
        element_type, x, y, width, height, z_index=z_index, properties={"text": text}
    )


def _image(y, height, z_index):
    return create_element(
        ElementType.IMAGE,
        CONTENT_X,
        y,
        CONTENT_WIDTH,
        height,
        z_index=z_index,
        properties={"placeholder": True},
    )


def _layout(elements) -> dict:
    layout: TemplateLayout = replace_elements(create_empty_layout(), elements)
    return layout.to_json_dict()


def create_empty_template() -> Template:
    return Template(
        name="Empty Template",
        description="A blank template to start from scratch",
        layout=create_empty_layout().to_json_dict(),
    )


def create_blog_template() -> Template:
    elements = [
        _text(ElementType.HEADER, 50, 100, 0, "Blog Post Title"),
        _image(170, 350, 1),
        _text(
            ElementType.TEXT, 540, 150, 2,
            "Start your blog post with an engaging introduction.",
        ),
        create_element(ElementType.DIVIDER, CONTENT_X, 710, CONTENT_WIDTH, 20, z_index=3),
        _text(
            ElementType.TEXT, 750, 250, 4,
            "Write your main blog content here. Explain key points and engage "
            "with your readers through compelling stories and examples.",
        ),
    ]
    return Template(
        name="Blog Post",
        description="A template for creating blog posts with header, image, and text sections",
        layout=_layout(elements),
    )


def create_photo_gallery_template() -> Template:
    elements = [
        _text(ElementType.HEADER, 50, 100, 0, "Photo Gallery"),
        _text(
            ElementType.TEXT, 170, 100, 1,
            "A collection of beautiful images from my travels.",
        ),
    ]
    for i in range(3):
        elements.append(_image(290 + i * 270, 220, i + 2))
        elements.append(
            _text(
                ElementType.TEXT, 520 + i * 270, 40, i + 5,
                f"Image caption {i + 1} - Add description here",
            )
        )
    return Template(
        name="Photo Gallery",
        description="A template for showcasing multiple photos with captions",
        layout=_layout(elements),
    )


def create_article_template() -> Template:
    elements = [
        _text(ElementType.HEADER, 50, 100, 0, "Article Title"),
        _text(
            ElementType.TEXT, 170, 120, 1,
            "Start with a compelling introduction that hooks your readers "
            "and introduces your topic.",
        ),
        _image(310, 300, 2),
    ]
    sections = [
        (
            "First Section",
            "Explain your first main point with supporting details and examples.",
        ),
        (
            "Second Section",
            "Continue with your second main point, maintaining reader interest.",
        ),
        (
            "Conclusion",
            "Summarize your key points and leave the reader with a final "
            "thought or call to action.",
        ),
    ]
    y = 630
    for i, (heading, body) in enumerate(sections):
        elements.append(_text(ElementType.HEADER, y, 60, i + 3, heading))
        y += 80
        elements.append(_text(ElementType.TEXT, y, 150, i + 6, body))
        y += 170
    return Template(
        name="Article",
        description="A comprehensive article template with sections and visuals",
        layout=_layout(elements),
    )


def create_tutorial_template() -> Template:
    elements = [
        _text(ElementType.HEADER, 50, 100, 0, "How-To Tutorial"),
        _text(
            ElementType.TEXT, 170, 100, 1,
            "In this tutorial, you'll learn how to accomplish [specific task] "
            "step by step.",
        ),
    ]
    steps = [
        (
            "Step 1: Getting Started",
            "Begin by gathering all necessary materials and preparing your workspace.",
        ),
        (
            "Step 2: Main Process",
            "Follow this key process carefully, paying attention to details "
            "for best results.",
        ),
        (
            "Step 3: Finalizing",
            "Complete the process by reviewing your work and making any final "
            "adjustments.",
        ),
    ]
    y = 290
    for i, (heading, body) in enumerate(steps):
        elements.append(_text(ElementType.HEADER, y, 60, i * 3 + 2, heading))
        y += 80
        elements.append(_text(ElementType.TEXT, y, 100, i * 3 + 3, body))
        y += 120
        elements.append(_image(y, 200, i * 3 + 4))
        y += 220
    elements.append(
        _text(
            ElementType.TEXT, y, 100, 11,
            "Congratulations! You've successfully completed the tutorial. "
            "Practice these steps to master the technique.",
        )
    )
    return Template(
        name="Tutorial",
        description="A step-by-step guide template with images for each step",
        layout=_layout(elements),
    )


def create_quote_template() -> Template:
    elements = [
        _text(
            ElementType.QUOTE, 150, 200, 0,
            "The future belongs to those who believe in the beauty of their dreams.",
        ),
        _text(ElementType.TEXT, 370, 50, 1, "- Eleanor Roosevelt", x=400, width=250),
        _image(450, 300, 2),
    ]
    return Template(
        name="Quote",
        description="A template for highlighting inspirational quotes with attribution",
        layout=_layout(elements),
    )


_BUILDERS: dict[str, Callable[[], Template]] = {
    TEMPLATE_TYPE_BLOG: create_blog_template,
    TEMPLATE_TYPE_PHOTO_GALLERY: create_photo_gallery_template,
    TEMPLATE_TYPE_ARTICLE: create_article_template,
    TEMPLATE_TYPE_TUTORIAL: create_tutorial_template,
    TEMPLATE_TYPE_QUOTE: create_quote_template,
}

PREDEFINED_TEMPLATE_TYPES = tuple(_BUILDERS)


def create_predefined_template(template_type: str) -> Template:
    """Create a predefined template by display name.

    Args:
        template_type: One of PREDEFINED_TEMPLATE_TYPES

    Returns:
        A new Template; unknown names produce the empty template
    """
    builder = _BUILDERS.get(template_type)
    if builder is None:
        logger.info(f"Unknown template type {template_type!r}, using empty template")
        return create_empty_template()
    return builder()
