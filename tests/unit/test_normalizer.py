from pan_validation.cleaning.normalizer import Normalizer, normalize, normalize_value


class TestNormalizeValue:
    def test_trims_and_uppercases(self) -> None:
        assert normalize_value("  abcde1234f  ") == "ABCDE1234F"

    def test_none_is_discarded(self) -> None:
        assert normalize_value(None) is None

    def test_empty_is_discarded(self) -> None:
        assert normalize_value("") is None

    def test_whitespace_only_is_discarded(self) -> None:
        assert normalize_value(" \t\n ") is None

    def test_inner_whitespace_is_kept(self) -> None:
        assert normalize_value(" ab cd ") == "AB CD"

    def test_is_idempotent(self) -> None:
        for raw in ["  abcde1234f ", "XKPLR9382Q", "x", "straße", "\tmixed Case\n"]:
            once = normalize_value(raw)
            assert once is not None
            assert normalize_value(once) == once


class TestNormalize:
    def test_collapses_case_and_padding_variants(self) -> None:
        raw = ["ABCDE1234F", "abcde1234f", "  ABCDE1234F  ", None, ""]
        assert normalize(raw) == frozenset({"ABCDE1234F"})

    def test_keeps_distinct_values(self, sample_raw_values: list[str | None]) -> None:
        assert normalize(sample_raw_values) == frozenset(
            {"ABCDE1234F", "XKPLR9382Q", "AABCD1234E"}
        )

    def test_empty_input(self) -> None:
        assert normalize([]) == frozenset()

    def test_only_missing_values(self) -> None:
        assert normalize([None, "", "   "]) == frozenset()

    def test_accepts_any_iterable(self) -> None:
        assert normalize(v for v in ["a", "A"]) == frozenset({"A"})

    def test_result_is_fixed_point(self, sample_raw_values: list[str | None]) -> None:
        cleaned = normalize(sample_raw_values)
        assert normalize(cleaned) == cleaned


class TestNormalizerClass:
    def test_delegates_to_normalize(self, sample_raw_values: list[str | None]) -> None:
        assert Normalizer().normalize(sample_raw_values) == normalize(sample_raw_values)
