"""Tests for the pydantic schemas."""

import pytest
from pydantic import ValidationError

from schemas import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    Article,
    ArticleState,
    ContentElement,
    ContentPayload,
    EditableField,
    ElementSchema,
    ElementType,
    Template,
    TemplateLayout,
)


class TestElementType:
    """Tests for ElementType parsing."""

    @pytest.mark.parametrize("value", ["TEXT", "text", " Text "])
    def test_parse_is_case_insensitive(self, value):
        """Type names parse regardless of case and surrounding space."""
        assert ElementType.parse(value) is ElementType.TEXT

    @pytest.mark.parametrize("value", ["VIDEO", "", None, 3])
    def test_parse_rejects_unknown(self, value):
        """Anything outside the closed set is rejected."""
        with pytest.raises(ValueError, match="Unknown element type"):
            ElementType.parse(value)

    def test_text_bearing_types(self):
        """TEXT, HEADER and QUOTE hold text; IMAGE and DIVIDER do not."""
        bearing = {t for t in ElementType if t.is_text_bearing}

        assert bearing == {ElementType.TEXT, ElementType.HEADER, ElementType.QUOTE}


class TestElementSchema:
    """Tests for ElementSchema."""

    def test_reads_camel_case_json(self):
        """Stored zIndex maps onto z_index."""
        element = ElementSchema.model_validate(
            {"id": "a", "type": "image", "x": 1, "y": 2, "width": 3, "height": 4, "zIndex": 5}
        )

        assert element.type is ElementType.IMAGE
        assert element.z_index == 5
        assert element.properties == {}

    def test_generates_unique_ids(self):
        """Elements created without an id get distinct generated ids."""
        first = ElementSchema(type=ElementType.TEXT)
        second = ElementSchema(type=ElementType.TEXT)

        assert first.id
        assert first.id != second.id

    def test_rejects_negative_dimensions(self):
        """Width and height may not be negative."""
        with pytest.raises(ValidationError):
            ElementSchema(type=ElementType.TEXT, width=-1)

    def test_is_frozen(self):
        """Elements cannot be mutated in place."""
        element = ElementSchema(type=ElementType.TEXT)

        with pytest.raises(ValidationError):
            element.x = 10

    def test_set_property_returns_copy(self):
        """set_property leaves the original element and its map untouched."""
        original = ElementSchema(type=ElementType.TEXT, properties={"text": "a"})

        updated = original.set_property("text", "b")

        assert updated.get_property("text") == "b"
        assert original.get_property("text") == "a"
        assert updated.properties is not original.properties
        assert updated.id == original.id

    def test_remove_property(self):
        """remove_property drops only the named key."""
        element = ElementSchema(
            type=ElementType.IMAGE, properties={"placeholder": True, "url": "u"}
        )

        updated = element.remove_property("placeholder")

        assert updated.properties == {"url": "u"}
        assert element.properties == {"placeholder": True, "url": "u"}

    def test_get_property_default(self):
        """Missing properties return the given default."""
        element = ElementSchema(type=ElementType.TEXT)

        assert element.get_property("text") is None
        assert element.get_property("text", "fallback") == "fallback"

    def test_duplicate_gets_new_id(self):
        """duplicate copies geometry and properties under a new id."""
        element = ElementSchema(
            type=ElementType.QUOTE, x=5, width=100, properties={"text": "q"}
        )

        copy = element.duplicate()

        assert copy.id != element.id
        assert copy.x == 5
        assert copy.properties == {"text": "q"}
        assert copy.properties is not element.properties

    def test_properties_are_read_only(self):
        """The property map cannot be changed in place."""
        element = ElementSchema(type=ElementType.TEXT, properties={"text": "a"})

        with pytest.raises(TypeError):
            element.properties["text"] = "b"

    def test_properties_not_shared_with_source(self):
        """Later changes to the source dict do not reach the element."""
        source = {"text": "a", "style": {"bold": True}}

        element = ElementSchema(type=ElementType.TEXT, properties=source)
        source["text"] = "b"
        source["style"]["bold"] = False

        assert element.get_property("text") == "a"
        assert element.get_property("style") == {"bold": True}

    def test_properties_serialize_as_dict(self):
        """Dumped properties are a plain dict."""
        element = ElementSchema(type=ElementType.TEXT, properties={"text": "a"})

        data = element.to_json_dict()

        assert type(data["properties"]) is dict
        assert data["properties"] == {"text": "a"}

    def test_to_json_dict_uses_stored_keys(self):
        """Serialization writes zIndex and the type name."""
        element = ElementSchema(id="a", type=ElementType.HEADER, z_index=2)

        data = element.to_json_dict()

        assert data["zIndex"] == 2
        assert data["type"] == "HEADER"
        assert "z_index" not in data


class TestTemplateLayout:
    """Tests for TemplateLayout."""

    def test_defaults(self):
        """Empty layout uses the default canvas."""
        layout = TemplateLayout()

        assert layout.canvas_width == DEFAULT_CANVAS_WIDTH == 1080
        assert layout.canvas_height == DEFAULT_CANVAS_HEIGHT == 1920
        assert layout.background_color == DEFAULT_BACKGROUND_COLOR == "#FFFFFF"
        assert layout.elements == ()

    def test_elements_sorted_on_validation(self, sample_layout_data):
        """Elements are held in ascending zIndex order."""
        layout = TemplateLayout.model_validate(sample_layout_data)

        assert layout.element_ids() == ["title", "hero", "body", "divider", "closing"]

    def test_equal_z_index_keeps_order(self):
        """Elements sharing a zIndex keep their input order."""
        layout = TemplateLayout(
            elements=[
                ElementSchema(id="b", type=ElementType.TEXT, z_index=1),
                ElementSchema(id="a", type=ElementType.TEXT, z_index=1),
                ElementSchema(id="c", type=ElementType.TEXT, z_index=0),
            ]
        )

        assert layout.element_ids() == ["c", "b", "a"]

    def test_canvas_property(self, sample_layout_data):
        """canvas bundles width, height and background."""
        canvas = TemplateLayout.model_validate(sample_layout_data).canvas

        assert (canvas.width, canvas.height, canvas.background_color) == (800, 1200, "#FAFAFA")

    def test_to_json_dict_round_trips(self, sample_layout_data):
        """Serialized layouts read back to an equal layout."""
        layout = TemplateLayout.model_validate(sample_layout_data)

        data = layout.to_json_dict()

        assert data["canvasWidth"] == 800
        assert TemplateLayout.model_validate(data) == layout


class TestContentSchemas:
    """Tests for content payload models."""

    def test_payload_omits_unset_keys(self):
        """Entries without content or url leave those keys out."""
        payload = ContentPayload(
            elements=[
                ContentElement(id="a", type="TEXT", content="hi"),
                ContentElement(id="b", type="IMAGE"),
            ]
        )

        assert payload.to_json_dict() == {
            "elements": [
                {"id": "a", "type": "TEXT", "content": "hi"},
                {"id": "b", "type": "IMAGE"},
            ]
        }

    def test_editable_field_value_defaults_to_initial(self):
        """A new field starts with its template value."""
        field = EditableField(element_id="a", type=ElementType.TEXT, initial_value="x")

        assert field.value == "x"
        assert not field.modified

    def test_editable_field_with_value(self):
        """with_value returns a modified copy."""
        field = EditableField(element_id="a", type=ElementType.TEXT, initial_value="x")

        updated = field.with_value("y")

        assert updated.value == "y"
        assert updated.modified
        assert field.value == "x"

    def test_divider_field_is_not_editable(self):
        """Divider fields carry no value and are not editable."""
        field = EditableField(element_id="d", type=ElementType.DIVIDER)

        assert not field.editable
        assert field.value is None


class TestArticle:
    """Tests for the Article model."""

    @pytest.mark.parametrize(
        "code, expected",
        [
            ("draft", ArticleState.DRAFT),
            ("PENDING_REVIEW", ArticleState.PENDING_REVIEW),
            ("Published", ArticleState.PUBLISHED),
            ("deleted", ArticleState.DELETED),
        ],
    )
    def test_status_codes_parse(self, code, expected):
        """State codes parse case-insensitively."""
        assert Article(status=code).status is expected

    @pytest.mark.parametrize("code", ["bogus", "", None])
    def test_unknown_status_falls_back_to_draft(self, code):
        """Unrecognized state codes read as DRAFT."""
        assert Article(status=code).status is ArticleState.DRAFT

    def test_state_codes(self):
        """Each state exposes its lowercase storage code."""
        assert ArticleState.PENDING_REVIEW.code == "pending_review"
        assert {s.code for s in ArticleState} == {
            "draft", "saved", "pending_review", "published", "archived", "deleted",
        }

    def test_content_json_string_is_parsed(self):
        """Content stored as a JSON string is decoded."""
        article = Article(content='{"elements": []}')

        assert article.content == {"elements": []}

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]", 5])
    def test_malformed_content_is_dropped(self, content, caplog):
        """Content that is not a JSON object is ignored with a warning."""
        article = Article(content=content)

        assert article.content is None
        assert "ignoring it" in caplog.text

    def test_extra_fields_are_kept(self):
        """Backend fields the model does not know are carried through."""
        article = Article.model_validate({"title": "t", "author_id": 3})

        assert article.model_dump()["author_id"] == 3


class TestTemplate:
    """Tests for the Template model."""

    def test_defaults(self):
        """Templates start at version 1 with no layout."""
        template = Template(name="Empty")

        assert template.version == 1
        assert template.layout is None
        assert template.id is None

    def test_requires_name(self):
        """A template must have a name."""
        with pytest.raises(ValidationError):
            Template()

    @pytest.mark.parametrize(
        "stored", ['{"elements": []}', ["garbage"], "not json", 17, {"elements": "x"}]
    )
    def test_keeps_any_stored_layout(self, stored):
        """Whatever the backend stored as the layout is kept as-is."""
        template = Template(name="t", layout=stored)

        assert template.layout == stored
