import pytest
from dialogtree.core import MalformedDataError
from dialogtree.serialization import validate_dialog_data


def test_valid_documents():
    validate_dialog_data({"start": {}})
    validate_dialog_data({"name": None, "root": {"lines": []}})
    validate_dialog_data({
        "name": "nested",
        "start": {
            "lines": [{"id": "A", "content": "a"}],
            "children": [{"entry": "anything", "children": [{"lines": ["b"]}]}],
        },
    })


@pytest.mark.parametrize("data", [
    None,
    {},
    {"name": 3, "start": {}},
    {"start": {}, "root": {}},
    {"start": {"children": {}}},
    {"start": {"children": [{"children": [{"unknown": 1}]}]}},
])
def test_invalid_documents(data):
    with pytest.raises(MalformedDataError):
        validate_dialog_data(data)


def test_error_names_location():
    with pytest.raises(MalformedDataError) as info:
        validate_dialog_data({"start": {"children": [{"lines": 1}]}})
    assert "start/children/0/lines" in str(info.value)
