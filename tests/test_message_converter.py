from claude_cli_proxy.models import OpenAIChatMessage
from claude_cli_proxy.services.conversion import ConvertedMessages, convert_messages


def _msg(role, content):
    return OpenAIChatMessage(role=role, content=content)


def test_system_message_is_split_from_prompt() -> None:
    result = convert_messages([_msg("system", "Be terse."), _msg("user", "Hi")])
    assert result == ConvertedMessages(prompt="Hi", system_prompt="Be terse.")


def test_assistant_turns_are_wrapped_as_previous_response() -> None:
    result = convert_messages([_msg("user", "A"), _msg("assistant", "B"), _msg("user", "C")])
    assert result.prompt == "A\n<previous_response>\nB\n</previous_response>\n\nC"
    assert result.system_prompt is None


def test_empty_message_list() -> None:
    result = convert_messages([])
    assert result.prompt == ""
    assert result.system_prompt is None


def test_multiple_system_messages_joined_with_blank_line() -> None:
    result = convert_messages([
        _msg("system", "First."),
        _msg("user", "Q"),
        _msg("system", "Second."),
    ])
    assert result.system_prompt == "First.\n\nSecond."
    assert result.prompt == "Q"


def test_empty_system_message_still_yields_system_prompt() -> None:
    result = convert_messages([_msg("system", ""), _msg("user", "Hi")])
    assert result.system_prompt == ""


def test_only_system_messages_gives_empty_prompt() -> None:
    result = convert_messages([_msg("system", "Rules")])
    assert result.prompt == ""
    assert result.system_prompt == "Rules"


def test_unknown_roles_are_dropped() -> None:
    result = convert_messages([
        _msg("tool", "tool output"),
        _msg("user", "Hi"),
        _msg("function", "ignored"),
        _msg("developer", "also ignored"),
    ])
    assert result == ConvertedMessages(prompt="Hi", system_prompt=None)


def test_roles_are_case_sensitive() -> None:
    result = convert_messages([_msg("System", "x"), _msg("USER", "y")])
    assert result == ConvertedMessages(prompt="", system_prompt=None)


def test_order_is_preserved_per_channel() -> None:
    result = convert_messages([
        _msg("user", "u1"),
        _msg("system", "s1"),
        _msg("user", "u2"),
        _msg("system", "s2"),
        _msg("user", "u3"),
    ])
    assert result.prompt == "u1\nu2\nu3"
    assert result.system_prompt == "s1\n\ns2"


def test_prompt_is_trimmed_but_inner_content_is_verbatim() -> None:
    result = convert_messages([_msg("user", "  \n hello \n\n  world  \n")])
    assert result.prompt == "hello \n\n  world"


def test_trailing_assistant_newline_is_trimmed() -> None:
    result = convert_messages([_msg("user", "Q"), _msg("assistant", "A")])
    assert result.prompt == "Q\n<previous_response>\nA\n</previous_response>"


def test_system_content_is_not_trimmed() -> None:
    result = convert_messages([_msg("system", "  padded  ")])
    assert result.system_prompt == "  padded  "


def test_already_trimmed_prompt_is_unchanged() -> None:
    result = convert_messages([_msg("user", "one"), _msg("user", "two")])
    assert convert_messages([_msg("user", result.prompt)]).prompt == result.prompt


def test_null_content_counts_as_empty() -> None:
    result = convert_messages([_msg("user", "Q"), _msg("assistant", None)])
    assert result.prompt == "Q\n<previous_response>\n\n</previous_response>"


def test_accepts_plain_dicts() -> None:
    result = convert_messages([
        {"role": "system", "content": "S"},
        {"role": "user", "content": "U"},
        {"role": 42, "content": "bad role"},
    ])
    assert result == ConvertedMessages(prompt="U", system_prompt="S")
