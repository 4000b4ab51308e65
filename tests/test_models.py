import pytest
from pydantic import ValidationError

from apidoc.parser.base import Document, Example, Param, Request, Status


class TestParam:
    def test_defaults(self):
        p = Param(name="id")
        assert p.param_type == ""
        assert p.optional is False
        assert p.description == ""

    def test_param_is_frozen(self):
        p = Param(name="id")
        with pytest.raises(ValidationError):
            p.name = "other"


class TestRequest:
    def test_create_request_with_examples(self):
        req = Request(
            content_type="application/json",
            headers={"Authorization": "Bearer x"},
            params=[Param(name="name", description="display name")],
            examples=[Example(lang="json", code='{"name": "a"}')],
        )
        assert req.params[0].name == "name"
        assert req.examples[0].lang == "json"

    def test_status_requires_code_and_type(self):
        with pytest.raises(ValidationError):
            Status(summary="OK")


class TestDocument:
    def test_empty_document(self):
        doc = Document()
        assert doc.url == ""
        assert doc.queries == []
        assert doc.request is None

    def test_defaults_are_not_shared(self):
        a, b = Document(), Document()
        a.queries.append(Param(name="page"))
        assert b.queries == []

    def test_document_serialization_roundtrip(self):
        doc = Document(
            url="/users/{id}",
            methods="GET",
            summary="Get user",
            queries=[Param(name="fields", optional=True)],
            request=Request(content_type="json", headers={"Accept": "json"}),
        )
        data = doc.model_dump()
        doc2 = Document(**data)
        assert doc2 == doc
        assert doc2.request.headers == {"Accept": "json"}
