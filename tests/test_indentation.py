from herlang.indentation import check_indentation

UNCLOSED = "[Warning] EOF: Some blocks not closed properly (missing 'end')."


def test_well_formed_source_has_no_warnings():
    source = (
        "function greet name:\n"
        "    say \"hi \" name\n"
        "end\n"
        "\n"
        "# comment at column zero\n"
        "start:\n"
        "    greet \"you\"\n"
        "end\n"
    )
    assert check_indentation(source) == []


def test_empty_source():
    assert check_indentation("") == []


def test_top_level_statements_are_not_checked():
    assert check_indentation("say \"x\"\nset y\n") == []


def test_end_without_block():
    assert check_indentation("end\n") == [
        "[Warning] Line 1: 'end' without matching block start."
    ]


def test_end_indentation_mismatch():
    warnings = check_indentation("start:\n    say x\n  end\n")
    assert len(warnings) == 1
    assert warnings[0].startswith("[Warning] Line 3: 'end' indentation mismatch.")
    assert "got 2." in warnings[0]


def test_body_not_indented():
    warnings = check_indentation("start:\nsay x\nend\n")
    assert len(warnings) == 1
    assert warnings[0].startswith("[Warning] Line 2: Inconsistent indentation.")


def test_missing_end_reported_last():
    warnings = check_indentation("start:\n    say x\n")
    assert warnings == [UNCLOSED]


def test_nested_blocks_pop_in_order():
    source = (
        "function f:\n"
        "    if x\n"
        "        say x\n"
        "    end\n"
        "end\n"
    )
    assert check_indentation(source) == []


def test_comment_and_blank_lines_still_count_for_line_numbers():
    source = "start:\n\n# note\nsay x\nend\n"
    warnings = check_indentation(source)
    assert len(warnings) == 1
    assert warnings[0].startswith("[Warning] Line 4:")


def test_tabs_do_not_count_as_indentation():
    warnings = check_indentation("start:\n\tsay x\nend\n")
    assert len(warnings) == 1
    assert "Inconsistent indentation" in warnings[0]


def test_every_warning_is_prefixed():
    source = "end\nstart:\nsay x\n  end\nfunction g:\n"
    warnings = check_indentation(source)
    assert len(warnings) == 4
    assert all(w.startswith("[Warning] ") for w in warnings)
    assert warnings[-1] == UNCLOSED