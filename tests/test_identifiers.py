import pytest

from data_type_registry import FailureReason, MalformedIdentifierError
from data_type_registry.utils.identifiers import HierarchicalIdentifier, Url, Urn


@pytest.mark.parametrize("value", [
    "https://schema.twindev.org/framework/URN",
    "http://example.org",
    "urn:example:resource",
    "mailto:someone@example.org",
])
def test_url_accepts_absolute_uris(value):
    assert Url.is_valid(value)


@pytest.mark.parametrize("value", [None, "", "Number", "not a url", "https://", "1abc:foo", "https://exa mple.org", 3])
def test_url_rejects_other_values(value):
    failures = []
    assert not Url.validate("p.type", value, failures)
    assert [(f.property, f.reason) for f in failures] == [("p.type", FailureReason.BE_URL)]


def test_urn_parse():
    urn = Urn.parse("urn:example:org:resource")
    assert urn.namespace_identifier == "example"
    assert urn.namespace_specific == "org:resource"
    assert urn.parts() == ["example", "org", "resource"]
    assert str(urn) == "urn:example:org:resource"


@pytest.mark.parametrize("value", ["urn:example", "example:a:b", "urn:-bad:x", "urn::x", "urn:a b:c", None])
def test_urn_rejects_invalid(value):
    failures = []
    assert not Urn.validate("id", value, failures)
    assert failures[0].reason == FailureReason.BE_URN
    with pytest.raises(MalformedIdentifierError):
        Urn.parse(value)


def test_hierarchical_identifier_segments():
    identifier = HierarchicalIdentifier.parse("scheme:org:resource:sub")
    assert identifier.segments == ("scheme", "org", "resource", "sub")
    assert identifier.join(1) == "org:resource:sub"
    assert identifier.join(0, 2) == "scheme:org"
    assert str(identifier) == "scheme:org:resource:sub"


def test_hierarchical_identifier_delimiter():
    assert HierarchicalIdentifier.parse("a/b", "/").segments == ("a", "b")
    assert HierarchicalIdentifier.parse("a:b", "/").segments == ("a:b",)
    with pytest.raises(ValueError):
        HierarchicalIdentifier.parse("a:b", "")


def test_hierarchical_identifier_is_valid():
    assert HierarchicalIdentifier.is_valid("a:b")
    assert not HierarchicalIdentifier.is_valid("a::b")
