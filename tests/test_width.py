# tests/test_width.py
import pytest

from jpsubs_core.subtitles.operations import (
    FULLWIDTH_ALNUM_RULES,
    convert_character_widths,
    to_fullwidth,
    widen_isolated_alnum,
)
from jpsubs_core.subtitles.rules import compile_rules


@pytest.mark.parametrize('char,expected', [
    ('A', 'Ａ'),
    ('Z', 'Ｚ'),
    ('a', 'ａ'),
    ('z', 'ｚ'),
    ('0', '０'),
    ('9', '９'),
    ('あ', 'あ'),
    ('-', '-'),
    ('Ａ', 'Ａ'),
])
def test_to_fullwidth(char, expected):
    assert to_fullwidth(char) == expected


@pytest.mark.parametrize('text,expected', [
    # interior
    ('　x　', '　ｘ　'),
    ('第3話', '第３話'),
    # line start
    ('a　', 'ａ　'),
    ('Bパート', 'Ｂパート'),
    # line end
    ('プランB', 'プランＢ'),
    # sole character
    ('7', '７'),
    # neighbours separated by one character are each isolated
    ('a b', 'ａ ｂ'),
    ('1・2・3', '１・２・３'),
    # runs stay half-width
    ('ab', 'ab'),
    ('OKです', 'OKです'),
    ('2024年', '2024年'),
    ('ab c', 'ab ｃ'),
    # combining marks do not count as alphanumerics
    ('\u0301a\u0301', '\u0301ａ\u0301'),
    ('', ''),
])
def test_widen_isolated_alnum(make_subs, text, expected):
    subs = make_subs([(text, 0, 1000)])

    widen_isolated_alnum(subs)

    assert subs[0].text == expected


def test_widening_matches_run_length_rule(make_subs):
    text = 'x12　y　zz　3'
    subs = make_subs([(text, 0, 1000)])

    assert widen_isolated_alnum(subs) == 1
    assert subs[0].text == 'x12　ｙ　zz　３'


def test_widening_skips_comments(make_subs):
    subs = make_subs([('a', 0, 1000, 'Default', True)])

    assert widen_isolated_alnum(subs) == 0
    assert subs[0].text == 'a'


def test_fullwidth_alnum_table_covers_all_letters_and_digits():
    assert len(FULLWIDTH_ALNUM_RULES) == 62
    assert all(rule.rule_type == 'literal' for rule in FULLWIDTH_ALNUM_RULES)


def test_convert_character_widths(make_subs):
    subs = make_subs([
        ('ＴＶアニメ', 0, 1000),
        ('ﾃﾞﾊﾟｰﾄ', 1000, 2000),
        ('変化なし', 2000, 3000),
    ])

    changed = convert_character_widths(subs, compile_rules(FULLWIDTH_ALNUM_RULES))

    assert changed == 1
    assert [e.text for e in subs] == ['TVアニメ', 'ﾃﾞﾊﾟｰﾄ', '変化なし']
