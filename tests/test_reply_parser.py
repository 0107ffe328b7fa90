import pytest

from nextjs_openapi.errors import MalformedReply
from nextjs_openapi.parser.reply import clean_reply, parse_reply

REPLY = (
    '{"path":"/api/users/{id}","description":"User by id","methods":{"GET":{"summary":"Get user",'
    '"description":"Fetch one user","parameters":[{"name":"id","type":"string","in":"path","required":true}]}}}'
)


class TestCleanReply:
    def test_plain_json_unchanged(self):
        assert clean_reply(REPLY) == REPLY

    def test_strips_upper_case_fence(self):
        assert clean_reply(f"```JSON\n{REPLY}\n```") == REPLY

    def test_strips_lower_case_fence(self):
        assert clean_reply(f"```json\n{REPLY}\n```") == REPLY

    def test_strips_bare_fence(self):
        assert clean_reply(f"```\n{REPLY}\n```") == REPLY

    def test_drops_surrounding_prose(self):
        text = f"Here is the documentation you asked for:\n{REPLY}\nLet me know if you need more."
        assert clean_reply(text) == REPLY

    def test_no_braces_left_unchanged(self):
        assert clean_reply("  I could not analyze this file.  ") == "I could not analyze this file."

    def test_closing_before_opening_left_unchanged(self):
        assert clean_reply("} oops {") == "} oops {"


class TestParseReply:
    def test_fenced_and_plain_replies_match(self):
        fenced = parse_reply('```JSON\n{"path":"/x"}\n```')
        plain = parse_reply('{"path":"/x"}')
        assert fenced == plain
        assert plain.path == "/x"

    def test_parses_full_document(self):
        doc = parse_reply(REPLY)
        assert doc.path == "/api/users/{id}"
        op = doc.methods["GET"]
        assert op.summary == "Get user"
        assert op.parameters[0].name == "id"
        assert op.parameters[0].location == "path"
        assert op.parameters[0].required is True

    def test_method_case_preserved(self):
        doc = parse_reply('{"path":"/x","methods":{"Post":{"summary":"s"}}}')
        assert list(doc.methods) == ["Post"]

    def test_nested_braces_in_strings(self):
        doc = parse_reply('Sure! {"path":"/x/{id}","description":"uses {curly} text"} Done.')
        assert doc.description == "uses {curly} text"

    def test_no_braces_is_malformed(self):
        with pytest.raises(MalformedReply) as exc_info:
            parse_reply("I am unable to document this route.")
        assert exc_info.value.text == "I am unable to document this route."

    def test_truncated_json_is_malformed(self):
        with pytest.raises(MalformedReply):
            parse_reply('{"path":"/x","methods":{"GET":{"summary":"cut off')

    def test_missing_path_is_malformed(self):
        with pytest.raises(MalformedReply) as exc_info:
            parse_reply('{"description":"no path"}')
        assert "path" in str(exc_info.value)

    def test_wrong_shape_is_malformed(self):
        with pytest.raises(MalformedReply):
            parse_reply('{"path":"/x","methods":["GET","POST"]}')

    def test_null_method_body_becomes_empty_operation(self):
        doc = parse_reply('{"path":"/x","methods":{"GET":null}}')
        op = doc.methods["GET"]
        assert op.summary == ""
        assert op.parameters == []
