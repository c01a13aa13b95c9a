# tests/test_rules_compiler.py
from __future__ import annotations

"""
Tests for stemming/rules/{types,compiler}.py

Does:
  - Check the reversal convention, flags, remove/append parsing and labels.
  - Check bucket assignment and definition order.
  - Check the end pseudo-rule and the grammar error paths.
  - Smoke-test the bundled ruleset.
"""

import io

import pytest

from paice_husk.stemming.rules import compiler as C
from paice_husk.stemming.rules.types import BUCKET_LETTERS, Rule, RuleTable


# ──────────────────────────────────────────────────────────────────────────────
# Entry parsing
# ──────────────────────────────────────────────────────────────────────────────

def test_suffix_is_stored_unreversed():
    table = C.compile_rules("gni3>\n")
    (rule,) = table.bucket("g")
    assert rule.suffix == "ing"
    assert rule.remove_count == 3
    assert rule.append == ""
    assert rule.continues is True
    assert rule.intact_only is False


@pytest.mark.parametrize(
    "text,suffix,intact,remove,append,continues",
    [
        ("sei3y.", "ies", False, 3, "y", False),
        ("ai*2.", "ia", True, 2, "", False),
        ("dr1i.", "rd", False, 1, "i", False),
        ("city3s.", "ytic", False, 3, "s", False),
        ("rae0.", "ear", False, 0, "", False),
        ("s*1>", "s", True, 1, "", True),
        ("ssen>", "ness", False, 0, "", True),     # no digits -> remove 0
        ("hsiug5ct.", "guish", False, 5, "ct", False),
    ],
)
def test_entry_fields(text, suffix, intact, remove, append, continues):
    rules = list(C.compile_rules(text + "\n"))
    assert len(rules) == 1
    r = rules[0]
    assert (r.suffix, r.intact_only, r.remove_count, r.append, r.continues) == (
        suffix, intact, remove, append, continues,
    )
    assert r.label == f"(1:{text})"


def test_labels_count_entries_and_skip_blank_lines():
    table = C.compile_rules("\n\n  sei3y.\n\n\t gni3>\n")
    labels = [r.label for r in table]
    assert labels == ["(1:sei3y.)", "(2:gni3>)"]


def test_rest_of_line_is_a_comment():
    table = C.compile_rules("sei3y.  { -ies > -y } s1> ignored too\ngni3>\n")
    assert [r.label for r in table] == ["(1:sei3y.)", "(2:gni3>)"]
    assert table.bucket("s")[0].suffix == "ies"
    assert len(table.bucket("s")) == 1


def test_bucket_is_first_raw_character_and_order_is_kept():
    table = C.compile_rules("sei3y.\nsis2.\ns*1>\ns0.\ngni3>\n")
    assert [r.suffix for r in table.bucket("s")] == ["ies", "sis", "s", "s"]
    assert [r.suffix for r in table.bucket("g")] == ["ing"]
    for letter in BUCKET_LETTERS:
        assert all(r.suffix.endswith(letter) for r in table.bucket(letter))


def test_empty_source_gives_empty_table():
    table = C.compile_rules("   \n\n")
    assert len(table) == 0
    assert table.bucket("s") == ()


def test_accepts_text_stream():
    table = C.compile_rules(io.StringIO("sei3y.\n"))
    assert len(table) == 1


# ──────────────────────────────────────────────────────────────────────────────
# End pseudo-rule
# ──────────────────────────────────────────────────────────────────────────────

def test_end_pseudo_rule_stops_compilation():
    # garbage after the terminator would be a grammar error if it were read
    table = C.compile_rules("sei3y.\nend0.\n#### not a rule\nsx\n")
    assert [r.label for r in table] == ["(1:sei3y.)"]


def test_end_pseudo_rule_stops_reading_the_stream():
    stream = io.StringIO("sei3y.\nend0.\ngni3>\n")
    C.compile_rules(stream)
    assert stream.read() == "\ngni3>\n"


def test_end_lookalikes_are_ordinary_rules():
    table = C.compile_rules("end1.\nend0>\nsei3y.\n")
    assert [r.label for r in table] == ["(1:end1.)", "(2:end0>)", "(3:sei3y.)"]
    assert table.bucket("e")[0].suffix == "dne"


# ──────────────────────────────────────────────────────────────────────────────
# Errors
# ──────────────────────────────────────────────────────────────────────────────

def test_invalid_terminator_raises():
    with pytest.raises(C.GrammarError) as ei:
        C.compile_rules("sei3y.\nsei3y,\n")
    err = ei.value
    assert err.entry == 2
    assert err.line == 2
    assert err.column == 6
    assert err.char == ","
    assert "entry 2" in str(err)


@pytest.mark.parametrize("text", ["#comment\n", "1s.\n", "Sei3y.\n", "*s1.\n", ">\n"])
def test_invalid_rule_start_raises(text):
    with pytest.raises(C.GrammarError) as ei:
        C.compile_rules(text)
    assert ei.value.entry == 1
    assert ei.value.column == 1


def test_error_after_valid_rules_fails_whole_compilation():
    with pytest.raises(C.GrammarError):
        C.compile_rules("sei3y.\ngni3>\n?bad\nnn1.\n")


def test_missing_terminator_at_end_of_input_raises():
    with pytest.raises(C.GrammarError) as ei:
        C.compile_rules("sei3y")
    assert ei.value.char == ""
    assert "end of input" in str(ei.value)


def test_uppercase_letter_inside_entry_raises():
    with pytest.raises(C.GrammarError) as ei:
        C.compile_rules("seI3y.\n")
    assert ei.value.char == "I"


def test_load_rules_reads_file(rule_file):
    table = C.load_rules(rule_file)
    assert [r.label for r in table] == ["(1:sei3y.)", "(2:gni3>)", "(3:nn1.)"]


def test_load_rules_missing_file_raises_source_error(tmp_path):
    with pytest.raises(C.RuleSourceError):
        C.load_rules(tmp_path / "nope.txt")


def test_load_rules_propagates_grammar_error(tmp_path):
    p = tmp_path / "bad.txt"
    p.write_text("sei3y.\n#bad\n", encoding="utf-8")
    with pytest.raises(C.GrammarError) as ei:
        C.load_rules(p)
    assert not isinstance(ei.value, C.RuleSourceError)
    assert (ei.value.entry, ei.value.line, ei.value.char) == (2, 2, "#")


# ──────────────────────────────────────────────────────────────────────────────
# Data model
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("bad", [dict(suffix=""), dict(suffix="Ab"), dict(remove_count=-1)])
def test_rule_rejects_invalid_fields(bad):
    fields = dict(suffix="ies", intact_only=False, remove_count=3, append="y",
                  continues=False, label="(1:sei3y.)")
    fields.update(bad)
    with pytest.raises(ValueError):
        Rule(**fields)


def test_rule_apply_clamps_removal():
    r = Rule("ab", False, 9, "x", False, "(1:ba9x.)")
    assert r.apply("ab") == "x"


def test_table_is_read_only():
    table = C.compile_rules("sei3y.\n")
    with pytest.raises(TypeError):
        table.buckets["s"] = ()  # type: ignore[index]
    assert table.bucket("?") == ()


def test_from_rules_groups_by_last_letter():
    r1 = Rule("ies", False, 3, "y", False, "(1:sei3y.)", 1)
    r2 = Rule("ing", False, 3, "", True, "(2:gni3>)", 2)
    table = RuleTable.from_rules([r1, r2])
    assert table.bucket("s") == (r1,)
    assert table.bucket("g") == (r2,)
    assert list(table) == [r1, r2]


# ──────────────────────────────────────────────────────────────────────────────
# Bundled ruleset
# ──────────────────────────────────────────────────────────────────────────────

def test_default_rules_load():
    table = C.load_default_rules()
    assert len(table) == 115
    rules = list(table)
    assert rules[0].label == "(1:ai*2.)"
    assert rules[-1].label == "(115:zy1s.)"
    assert [r.suffix for r in table.bucket("c")] == ["ytic", "ic", "nc"]
    assert C.load_default_rules() is table


def test_letter_after_append_is_not_a_terminator():
    # trailing letters belong to the append run, so the newline is the bad terminator
    with pytest.raises(C.GrammarError) as ei:
        C.compile_rules("sei3yx\n")
    assert ei.value.char == "\n"
