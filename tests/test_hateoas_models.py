import pytest
from pydantic import ValidationError

from models.greeting import Greeting
from models.hateoas import HALModel, Link


def test_add_link_overwrites_existing_relation():
    g = Greeting(content="Hello, World!")
    g.add_link("self", "http://a/greeting?name=A")
    g.add_link("next", "http://a/next")
    g.add_link("self", "http://a/greeting?name=B")

    assert list(g.links) == ["self", "next"]
    assert g.link("self") == Link(href="http://a/greeting?name=B")


def test_missing_relation_is_none():
    assert HALModel().link("self") is None


def test_links_serialized_under_hal_key_after_content():
    g = Greeting(content="Hello, World!").add_link("self", "http://a/greeting?name=World")
    data = g.model_dump(by_alias=True)

    assert list(data) == ["content", "_links"]
    assert data["_links"] == {"self": {"href": "http://a/greeting?name=World"}}


def test_validates_from_hal_payload():
    g = Greeting.model_validate(
        {"content": "Hello, X!", "_links": {"self": {"href": "http://a/greeting?name=X"}}}
    )
    assert g.link("self").href == "http://a/greeting?name=X"


def test_content_is_immutable():
    g = Greeting(content="Hello, World!")
    with pytest.raises(ValidationError):
        g.content = "Bye"


def test_content_required():
    with pytest.raises(ValidationError):
        Greeting()
