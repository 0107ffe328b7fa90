from nextjs_openapi.generator.assembler import SpecAssembler, standard_responses
from nextjs_openapi.parser.base import RouteDocumentation


def _doc(path: str, methods: dict) -> RouteDocumentation:
    return RouteDocumentation.model_validate({"path": path, "description": "", "methods": methods})


class TestSpecAssembler:
    def test_empty_document(self):
        document = SpecAssembler().build()
        data = document.model_dump()
        assert data == {
            "openapi": "3.0.0",
            "info": {"title": "Next.js API Documentation", "version": "1.0.0"},
            "paths": {},
        }

    def test_lowercases_methods(self):
        assembler = SpecAssembler()
        assembler.add(_doc("/api/items", {"GET": {}, "Post": {}, "delete": {}}))
        assert set(assembler.build().paths["/api/items"]) == {"get", "post", "delete"}

    def test_renders_parameters(self):
        assembler = SpecAssembler()
        assembler.add(_doc("/api/items", {
            "GET": {"parameters": [
                {"name": "limit", "type": "integer", "in": "query", "required": False},
                {"name": "q", "in": "query"},
            ]},
        }))
        params = assembler.build().paths["/api/items"]["get"]["parameters"]
        assert params == [
            {"name": "limit", "in": "query", "required": False, "schema": {"type": "integer"}},
            {"name": "q", "in": "query", "required": False, "schema": {"type": "string"}},
        ]

    def test_attaches_standard_responses(self):
        assembler = SpecAssembler()
        assembler.add(_doc("/api/items", {"GET": {"summary": "List"}}))
        op = assembler.build().paths["/api/items"]["get"]
        assert set(op["responses"]) == {"200", "400", "500"}
        assert op["responses"] == standard_responses()
        assert op["summary"] == "List"

    def test_same_record_twice_keeps_second(self):
        assembler = SpecAssembler()
        doc = _doc("/api/items", {"GET": {"summary": "List"}})
        assembler.add(doc)
        assembler.add(doc)
        assert list(assembler.build().paths["/api/items"]) == ["get"]

    def test_path_collision_overwrites_without_merge(self):
        assembler = SpecAssembler()
        assembler.add(_doc("/api/items", {"GET": {"summary": "first"}, "POST": {}}))
        assembler.add(_doc("/api/items", {"GET": {"summary": "second"}}))
        path_item = assembler.build().paths["/api/items"]
        assert list(path_item) == ["get"]
        assert path_item["get"]["summary"] == "second"

    def test_distinct_paths_are_kept(self):
        assembler = SpecAssembler()
        assembler.add(_doc("/api/a", {"GET": {}}))
        assembler.add(_doc("/api/b", {"GET": {}}))
        assert list(assembler.build().paths) == ["/api/a", "/api/b"]

    def test_route_without_methods_adds_empty_path(self):
        assembler = SpecAssembler()
        assembler.add(_doc("/api/empty", {}))
        assert assembler.build().paths["/api/empty"] == {}

    def test_responses_are_independent_copies(self):
        assembler = SpecAssembler()
        assembler.add(_doc("/api/items", {"GET": {}, "POST": {}}))
        path_item = assembler.build().paths["/api/items"]
        path_item["get"]["responses"]["400"]["description"] = "changed"
        assert path_item["post"]["responses"]["400"]["description"] == "Bad request"
