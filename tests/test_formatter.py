from Paint_shop.report.formatter import batch_frame, batch_summary, map_to_string
from Paint_shop.schema import Finish

G, M = Finish.GLOSS, Finish.MATTE


def test_map_to_string():
    assert map_to_string({}, set()) == ""
    assert map_to_string({}, range(1, 4)) == "G G G"
    assert map_to_string({2: M}, {3, 1, 2}) == "G M G"
    assert map_to_string({3: G, 2: G, 5: M}, range(1, 6)) == "G G G G M"


def test_map_to_string_ignores_codes_outside_range():
    assert map_to_string({9: M}, range(1, 3)) == "G G"


def test_map_to_string_custom_separator():
    assert map_to_string({1: M}, range(1, 3), sep=",") == "M,G"


def test_batch_frame_marks_constrained_codes():
    df = batch_frame({2: M, 3: G}, 4)
    assert list(df.columns) == ["code", "finish", "constrained"]
    assert df["code"].tolist() == [1, 2, 3, 4]
    assert df["finish"].tolist() == ["G", "M", "G", "G"]
    assert df["constrained"].tolist() == [False, True, True, False]


def test_batch_frame_empty():
    df = batch_frame({}, 0)
    assert len(df) == 0


def test_batch_summary_counts():
    summary = batch_summary(batch_frame({2: M, 3: G}, 4))
    assert summary == {"colours": 4, "gloss": 3, "matte": 1, "constrained": 2}
