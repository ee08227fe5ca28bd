"""Pytest fixtures for Article Canvas tests."""

import pytest

from schemas.article import Article, ArticleState
from schemas.template import Template


@pytest.fixture
def sample_layout_data():
    """Stored layout JSON, as the backend returns it.

    Elements are stored out of z-order on purpose; readers must sort them.
    """
    return {
        "canvasWidth": 800,
        "canvasHeight": 1200,
        "backgroundColor": "#FAFAFA",
        "elements": [
            {
                "id": "body",
                "type": "TEXT",
                "x": 50,
                "y": 540,
                "width": 600,
                "height": 150,
                "zIndex": 2,
                "properties": {"text": "Intro paragraph"},
            },
            {
                "id": "title",
                "type": "HEADER",
                "x": 50,
                "y": 50,
                "width": 600,
                "height": 100,
                "zIndex": 0,
                "properties": {"text": "Title"},
            },
            {
                "id": "divider",
                "type": "DIVIDER",
                "x": 50,
                "y": 710,
                "width": 600,
                "height": 20,
                "zIndex": 3,
                "properties": {},
            },
            {
                "id": "hero",
                "type": "IMAGE",
                "x": 50,
                "y": 170,
                "width": 600,
                "height": 350,
                "zIndex": 1,
                "properties": {"placeholder": True},
            },
            {
                "id": "closing",
                "type": "QUOTE",
                "x": 50,
                "y": 750,
                "width": 600,
                "height": 250,
                "zIndex": 4,
                "properties": {"text": "A closing quote"},
            },
        ],
    }


@pytest.fixture
def sample_template(sample_layout_data):
    """Template record wrapping the sample layout."""
    return Template(
        id=42,
        name="Blog Post",
        description="A template for creating blog posts",
        layout=sample_layout_data,
    )


@pytest.fixture
def sample_content():
    """Content payload as serialized from the sample layout.

    Dividers are not stored, so entries after the divider sit one position
    earlier than their element does in the skeleton.
    """
    return {
        "elements": [
            {"id": "title", "type": "HEADER", "content": "Stored title"},
            {"id": "hero", "type": "IMAGE", "url": "https://cdn.example.com/hero.jpg"},
            {"id": "body", "type": "TEXT", "content": "Stored body"},
            {"id": "closing", "type": "QUOTE", "content": "Stored quote"},
        ]
    }


@pytest.fixture
def sample_article(sample_content):
    """A saved article built on the sample template."""
    return Article(
        id=7,
        title="My first post",
        template_id=42,
        content=sample_content,
        status=ArticleState.SAVED,
        created_at="2026-01-15T10:00:00",
    )
