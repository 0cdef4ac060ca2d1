from m365kit.command import format_output


def test_json_output_keeps_non_ascii_text():
    assert format_output({"title": "Café"}) == '{\n  "title": "Café"\n}'


def test_text_output_aligns_keys():
    assert format_output({"id": "1", "title": "Café"}, "text") == "id   : 1\ntitle: Café"


def test_text_output_renders_list_of_objects_as_table():
    output = format_output([{"id": "1", "name": "a", "tags": []}, {"id": "22", "name": "b"}], "text")

    assert output.splitlines() == ["id  name", "--  ----", "1   a   ", "22  b   "]


def test_strings_are_printed_as_is():
    assert format_output("Use a web browser", "json") == "Use a web browser"
