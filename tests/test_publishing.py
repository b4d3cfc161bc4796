import pytest

from src.http import publishing
from src.specs.common.errors import ValidationError
from src.tools.instagram_publish_tool import CREDENTIALS_MISSING, DEFAULT_CAPTION


def test_publish_records_pending_attempt(stores, settings):
    record = publishing.publish_instagram(stores, settings, {"designId": "d1", "caption": "Hi"})
    assert record["status"] == "pending"
    assert record["platform"] == "instagram"
    assert record["caption"] == "Hi"
    assert record["publishedAt"] is None
    assert record["error"] == CREDENTIALS_MISSING
    assert publishing.list_history(stores)["history"] == [record]


def test_publish_defaults_caption(stores, settings):
    record = publishing.publish_instagram(stores, settings, {"designId": "d1"})
    assert record["caption"] == DEFAULT_CAPTION


def test_publish_requires_design_id(stores, settings):
    with pytest.raises(ValidationError) as excinfo:
        publishing.publish_instagram(stores, settings, {"caption": "Hi"})
    assert str(excinfo.value) == "designId is required"
    assert publishing.list_history(stores) == {"history": []}


def test_publish_ids_are_unique(stores, settings):
    ids = {publishing.publish_instagram(stores, settings, {"designId": "d1"})["id"] for _ in range(5)}
    assert len(ids) == 5


def test_export_defaults_to_png(settings):
    descriptor = publishing.export_email(settings, {"designId": "d1"})
    assert descriptor["format"] == "png"
    assert descriptor["status"] == "ready"
    assert descriptor["downloadUrl"] == "https://example.com/export/d1.png"


def test_export_pdf(settings):
    descriptor = publishing.export_email(settings, {"designId": "d1", "format": "pdf"})
    assert descriptor["downloadUrl"].endswith("/d1.pdf")


def test_export_rejects_svg(settings):
    with pytest.raises(ValidationError) as excinfo:
        publishing.export_email(settings, {"designId": "d1", "format": "svg"})
    assert str(excinfo.value) == "Unsupported format. Supported: png, pdf"


def test_export_requires_design_id(settings):
    with pytest.raises(ValidationError):
        publishing.export_email(settings, {"format": "png"})


def test_export_does_not_persist(stores, settings):
    publishing.export_email(settings, {"designId": "d1"})
    assert publishing.list_history(stores) == {"history": []}


def test_list_history_filters_by_status(stores, settings):
    publishing.publish_instagram(stores, settings, {"designId": "d1"})
    assert len(publishing.list_history(stores, status="pending")["history"]) == 1
    assert publishing.list_history(stores, status="published")["history"] == []


@pytest.mark.parametrize(
    "body",
    [
        {"designId": 42},
        {"designId": "d1", "caption": 7},
        {"designId": ["d1"]},
    ],
)
def test_publish_rejects_wrong_field_types(stores, settings, body):
    with pytest.raises(ValidationError) as excinfo:
        publishing.publish_instagram(stores, settings, body)
    assert excinfo.value.status_code == 400
    assert str(excinfo.value).startswith("Invalid request: ")
    assert publishing.list_history(stores) == {"history": []}


@pytest.mark.parametrize(
    "body",
    [
        {"designId": 42},
        {"designId": "d1", "format": 5},
    ],
)
def test_export_rejects_wrong_field_types(settings, body):
    with pytest.raises(ValidationError) as excinfo:
        publishing.export_email(settings, body)
    assert excinfo.value.status_code == 400


def test_export_empty_format_defaults_to_png(settings):
    descriptor = publishing.export_email(settings, {"designId": "d1", "format": ""})
    assert descriptor["format"] == "png"
