import pytest

from regtag.errors import ParseError
from regtag.models.reference import parse_reference


@pytest.mark.parametrize(
    "text",
    [
        "registry.example.com/ns/image:v1",
        "registry.example.com:5000/image:v1",
        "localhost/a/b/c",
        "quay.io/team/app:1.2.3-rc1",
    ],
)
def test_default_scheme_matches_explicit_https(text: str) -> None:
    implicit = parse_reference(text)
    explicit = parse_reference(f"https://{text}")
    assert implicit == explicit
    assert implicit.scheme == "https"


def test_parse_reference() -> None:
    ref = parse_reference("registry.example.com/ns/image:v1")
    assert ref.scheme == "https"
    assert ref.registry == "registry.example.com"
    assert ref.repository == "/ns/image"
    assert ref.tag == "v1"


def test_parse_keeps_port_and_scheme() -> None:
    ref = parse_reference("http://localhost:5000/image:dev")
    assert ref.scheme == "http"
    assert ref.registry == "localhost:5000"
    assert ref.repository == "/image"
    assert ref.tag == "dev"


def test_tag_defaults_to_latest() -> None:
    ref = parse_reference("registry.example.com/image")
    assert ref.repository == "/image"
    assert ref.tag == "latest"


@pytest.mark.parametrize(
    "text",
    [
        "registry.example.com/image:v1:v2",
        "registry.example.com",
        "registry.example.com/",
        "registry.example.com/:v1",
        "registry.example.com/image:",
        "https:///image:v1",
    ],
)
def test_parse_errors(text: str) -> None:
    with pytest.raises(ParseError):
        parse_reference(text)


def test_reference_urls() -> None:
    ref = parse_reference("registry.example.com/ns/image:v1")
    assert ref.manifests_url == "https://registry.example.com/v2/ns/image/manifests"
    assert ref.tags_url == "https://registry.example.com/v2/ns/image/tags/list"
    assert ref.manifest_url("v2") == "https://registry.example.com/v2/ns/image/manifests/v2"
    assert str(ref) == "registry.example.com/ns/image:v1"
