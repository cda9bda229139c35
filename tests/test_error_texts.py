import pytest

from drawcore.error_texts import error_names, error_text


def test_first_names_follow_code_order():
    names = error_names()
    assert names[0] == "eOk"
    assert names[1] == "eInvalidDrawing"
    assert names[2] == "eNotImplementedYet"


def test_last_name_is_cyclic_dependency():
    assert error_names()[-1] == "eCyclicDependency"


def test_names_are_unique():
    names = error_names()
    assert len(set(names)) == len(names)


def test_every_name_has_prefix_and_text():
    for name in error_names():
        assert name.startswith("e")
        text = error_text(name)
        assert isinstance(text, str) and text


@pytest.mark.parametrize(
    "name, text",
    [
        ("eOk", "No error"),
        ("eCantOpenFile", "Can't open file"),
        ("eEndOfObject", "End of oject"),
        ("eNotImplemented", "Not Implemented"),
        ("eNotImplementedYet", "Not implemented yet"),
        ("eCyclicDependency", "Cyclic dependency"),
        ("eInternetValidUrl", "Valid URL"),
        ("eGuidNoAddress", "eGuidNoAddress"),
    ],
)
def test_known_texts(name, text):
    assert error_text(name) == text


def test_padding_in_texts_is_kept():
    assert error_text("eInternetOK").startswith("OK ")
    assert error_text("eInternetOK").strip() == "OK"
    assert error_text("eInternetDiskFull").strip() == "DiskFull"


def test_format_placeholder_is_kept():
    assert '"%ls"' in error_text("eCryptProviderUnavailable")


def test_alias_resolves_to_canonical_text():
    assert error_text("eCannotBeErased") == error_text("eCannotBeErasedByCaller")
    assert "eCannotBeErased" not in error_names()


def test_duplicate_texts_for_distinct_codes():
    assert error_text("eDwgCRCError") == error_text("eDwgCrcDoesNotMatch")
    assert error_names().index("eDwgCRCError") < error_names().index("eDwgCrcDoesNotMatch")


def test_unknown_name_raises_key_error():
    with pytest.raises(KeyError):
        error_text("eNoSuchError")