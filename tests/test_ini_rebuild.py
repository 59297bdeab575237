import pytest

from autotranslate.errors import TranslationError
from autotranslate.ini_lines import classify_lines
from autotranslate.ini_rebuild import build_section_table, render, translate_ini


def test_translates_values_and_keeps_structure(fake_client):
    client = fake_client({"MyServer": "MonServeur"})
    source = "[server]\nname=MyServer\n# comment\nport=\n"

    assert translate_ini(source, client) == "[server]\nname=MonServeur\n# comment\nport=\n"
    assert client.calls == ["MyServer"]


def test_default_section_is_synthesized(fake_client):
    client = fake_client({"Hello": "Bonjour"})

    assert translate_ini("greeting=Hello\n", client) == "[default]\ngreeting=Bonjour\n"


def test_line_count_is_preserved(fake_client):
    source = "; top\n\n[a]\nx = one\n  odd line\ny=\n\n[b]\nz=two=three\n"
    result = translate_ini(source, fake_client())

    assert len(result.splitlines()) == len(source.splitlines())
    assert result.splitlines() == [
        "; top",
        "",
        "[a]",
        "x=ONE",
        "  odd line",
        "y=",
        "",
        "[b]",
        "z=TWO=THREE",
    ]


def test_empty_value_line_is_reproduced_verbatim(fake_client):
    client = fake_client()
    result = translate_ini("[s]\n  spaced  =   \n", client)

    assert result == "[s]\n  spaced  =   \n"
    assert client.calls == []


def test_empty_value_before_any_section_adds_no_header(fake_client):
    assert translate_ini("empty=\n", fake_client()) == "empty=\n"


def test_reopened_section_keeps_earlier_keys(fake_client):
    source = "[a]\nx=one\n[b]\ny=two\n[a]\nz=three\n"
    client = fake_client()
    lines = classify_lines(source)
    table = build_section_table(lines, client)

    assert table == {"a": {"x": "ONE", "z": "THREE"}, "b": {"y": "TWO"}}
    assert render(lines, table) == "[a]\nx=ONE\n[b]\ny=TWO\n[a]\nz=THREE\n"


def test_duplicate_keys_last_write_wins(fake_client):
    client = fake_client({"first": "premier", "second": "second-fr"})
    result = translate_ini("[s]\nk=first\nk=second\n", client)

    # Both lines look up the same table slot.
    assert result == "[s]\nk=second-fr\nk=second-fr\n"


def test_translation_failure_propagates(fake_client):
    client = fake_client(fail_on={"boom"})
    with pytest.raises(TranslationError):
        translate_ini("[s]\na=ok\nb=boom\n", client)
