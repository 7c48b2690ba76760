from inventory_service.app.services.search_parser import (
    ExactRackBin,
    FreeText,
    RackPrefix,
    parse_search_term,
)


class TestParseSearchTerm:
    def test_blank_terms_mean_no_filter(self):
        assert parse_search_term(None) is None
        assert parse_search_term("") is None
        assert parse_search_term("   ") is None

    def test_rack_and_bin_markers(self):
        assert parse_search_term("rack:A1-bin:01") == ExactRackBin(rack="a1", bin="01")

    def test_rack_and_bin_with_spaces_and_case(self):
        assert parse_search_term(" RACK: B2 - Bin: 15 ") == ExactRackBin(rack="b2", bin="15")

    def test_rack_prefix(self):
        assert parse_search_term("rack:A") == RackPrefix(prefix="a")

    def test_rack_prefix_without_value_matches_every_rack(self):
        assert parse_search_term("rack:") == RackPrefix(prefix="")

    def test_markers_without_hyphen_fall_back_to_prefix(self):
        result = parse_search_term("rack:A1 bin:01")
        assert isinstance(result, RackPrefix)
        assert result.prefix == "a1 bin:01"

    def test_anything_else_is_free_text(self):
        assert parse_search_term("trim") == FreeText(text="trim")
        assert parse_search_term(" A1-01 ") == FreeText(text="A1-01")

    def test_bin_marker_alone_is_free_text(self):
        assert parse_search_term("bin:01") == FreeText(text="bin:01")

    def test_exact_search_ignores_text_after_bin(self):
        assert parse_search_term("rack:A1-bin:01-x") == ExactRackBin(rack="a1", bin="01")
