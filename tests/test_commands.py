from link_tracker.commands import (
    CONNECTED,
    LINK,
    UNLINK,
    Command,
    CommandKeywords,
    format_answer,
    is_terminator,
    parse_command,
)


def test_parse_add_and_remove():
    assert parse_command("add 1 2") == Command(LINK, "1", "2")
    assert parse_command("remove 1 2\n") == Command(UNLINK, "1", "2")


def test_parse_query_is_case_insensitive():
    assert parse_command("IS Linked a b") == Command(CONNECTED, "a", "b")
    assert parse_command("Add Foo bar") == Command(LINK, "Foo", "bar")


def test_identifiers_are_kept_verbatim():
    command = parse_command("add 007 7")
    assert command.left == "007"
    assert command.right == "7"


def test_malformed_lines_are_ignored():
    assert parse_command("note: this shouldn't crash even though this line doesn't follow the format") is None
    assert parse_command("add 1") is None
    assert parse_command("add 1 2 3") is None
    assert parse_command("is 1 2") is None
    assert parse_command("is connected 1 2") is None
    assert parse_command("link 1 2") is None
    assert parse_command("") is None


def test_custom_keywords():
    keywords = CommandKeywords(add="join", remove="split", query=("are", "joined"))
    assert parse_command("join a b", keywords) == Command(LINK, "a", "b")
    assert parse_command("split a b", keywords) == Command(UNLINK, "a", "b")
    assert parse_command("are joined a b", keywords) == Command(CONNECTED, "a", "b")
    assert parse_command("add a b", keywords) is None


def test_terminator_and_answers():
    assert is_terminator("")
    assert is_terminator("\n")
    assert is_terminator("\r\n")
    assert not is_terminator("   \n")
    assert not is_terminator("add 1 2")
    assert format_answer(True) == "true"
    assert format_answer(False) == "false"
