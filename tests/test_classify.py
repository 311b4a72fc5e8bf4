from charstats.counts import CharCounts
from charstats.scanner import classify


def _assert_counts(cc, sp, nl, tot):
    assert (cc.space_count, cc.newline_count, cc.total_count) == (sp, nl, tot)


def test_classify_space_and_newline():
    cc = CharCounts()
    _assert_counts(cc, 0, 0, 0)
    classify(cc, " ", " ", " ")
    _assert_counts(cc, 1, 0, 1)
    classify(cc, " ", "\n", " ")
    _assert_counts(cc, 1, 1, 2)
    classify(cc, "a", "b", "c")
    _assert_counts(cc, 1, 1, 3)


def test_classify_absent_current_is_noop():
    cc = CharCounts()
    classify(cc, "a", None, "b")
    classify(cc, "a", "", "b")
    _assert_counts(cc, 0, 0, 0)


def test_classify_edge_character_not_counted():
    # 前後とも文字なし → total にも数えない
    cc = CharCounts()
    classify(cc, "", " ", "")
    classify(cc, None, "x", None)
    _assert_counts(cc, 0, 0, 0)


def test_classify_one_neighbor_is_enough():
    cc = CharCounts()
    classify(cc, "", "\n", "a")
    classify(cc, "a", " ", None)
    _assert_counts(cc, 1, 1, 2)
