"""Test data models, options and field utilities."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from record_search.core.exceptions import ValidationError, ConfigurationError, FieldAccessError
from record_search.models.match import MatchResult, MatchType
from record_search.models.options import MatchOptions, SearchOptions, SearchOptionsModel
from record_search.models.result import RankedResult
from record_search.utils.fields import get_nested_value, resolve_fields, extract_text, to_text
from record_search.utils.highlighting import HighlightSegment, highlight_match, highlight_html
from record_search.utils.validators import build_search_options, options_from_config


class TestMatchResult:
    """Test MatchResult model."""

    def test_valid_result(self):
        """Test creating a valid match result."""
        result = MatchResult(matched=True, score=0.85, type=MatchType.CONTAINS)
        assert result.to_dict() == {"matched": True, "score": 0.85, "type": "contains"}

    def test_score_out_of_range(self):
        """Test score range validation."""
        with pytest.raises(ValueError, match="Score must be between"):
            MatchResult(matched=True, score=1.2, type=MatchType.EXACT)

    def test_invalid_type(self):
        """Test match type validation."""
        with pytest.raises(ValueError, match="Invalid match type"):
            MatchResult(matched=True, score=0.5, type="fuzzy")  # type: ignore

    def test_no_match(self):
        """Test the no-match constructor."""
        result = MatchResult.no_match()
        assert not result.matched
        assert result.score == 0.0
        assert result.type == MatchType.NONE


class TestMatchType:
    """Test match type priorities."""

    def test_priority_order(self):
        """Test match type priority ordering."""
        ordered = sorted(MatchType, key=lambda t: t.priority, reverse=True)
        assert ordered == [
            MatchType.EXACT,
            MatchType.CONTAINS,
            MatchType.WORD,
            MatchType.FUZZY,
            MatchType.PARTIAL,
            MatchType.NONE,
        ]

    def test_string_values(self):
        """Test string values of match types."""
        assert MatchType("partial") is MatchType.PARTIAL
        assert MatchType.EXACT == "exact"


class TestRankedResult:
    """Test RankedResult model."""

    def test_to_dict(self):
        """Test ranked result serialization."""
        item = {"name": "Acme"}
        result = RankedResult(item=item, score=0.88236, match_type=MatchType.CONTAINS, field_index=2)
        data = result.to_dict()

        assert data["item"] is item
        assert data["score"] == 0.8824
        assert data["match_type"] == "contains"
        assert data["field_index"] == 2

    def test_none_match_type_rejected(self):
        """Test that unmatched results cannot be ranked."""
        with pytest.raises(ValueError, match="cannot have match type"):
            RankedResult(item={}, score=0.0, match_type=MatchType.NONE)


class TestOptions:
    """Test option dataclasses and pydantic model."""

    def test_match_defaults(self):
        """Test default match options."""
        options = MatchOptions()
        assert options.threshold == 0.6
        assert not options.case_sensitive
        assert not options.whole_words
        assert options.max_distance == 3

    def test_search_defaults(self):
        """Test default search options."""
        options = SearchOptions()
        assert options.threshold == 0.4
        assert options.min_score == 0.3
        assert options.limit is None

    @pytest.mark.parametrize("kwargs,message", [
        ({"threshold": 1.5}, "Threshold"),
        ({"min_score": -0.1}, "Min score"),
        ({"limit": -1}, "Limit cannot be negative"),
        ({"limit": 2.5}, "Limit must be an integer"),
        ({"limit": "5"}, "Limit must be an integer"),
        ({"limit": True}, "Limit must be an integer"),
        ({"max_distance": -1}, "Max distance"),
    ])
    def test_search_options_validation(self, kwargs, message):
        """Test that out-of-range and wrongly typed options are rejected."""
        with pytest.raises(ValueError, match=message):
            SearchOptions(**kwargs)

    def test_zero_limit_means_unlimited(self):
        """Test that a zero limit is stored as no limit on both option paths."""
        assert SearchOptions(limit=0).limit is None
        assert SearchOptions(limit=0) == SearchOptions()
        assert build_search_options(SearchOptions(limit=5), limit=0).limit is None
        assert SearchOptionsModel(limit=0).to_options().limit is None

    def test_to_match_options(self):
        """Test deriving classifier options from search options."""
        options = SearchOptions(threshold=0.7, case_sensitive=True, max_distance=2)
        assert options.to_match_options() == MatchOptions(
            threshold=0.7, case_sensitive=True, whole_words=False, max_distance=2
        )

    def test_merged_none_handling(self):
        """Test that None keeps most fields but lifts the limit."""
        options = SearchOptions(limit=5, min_score=0.5)
        merged = options.merged(min_score=None, threshold=0.7)
        assert merged.min_score == 0.5
        assert merged.threshold == 0.7
        assert merged.limit == 5

        assert options.merged(limit=None).limit is None
        assert options.merged() is options

    def test_model_conversion(self):
        """Test converting the pydantic model to options."""
        model = SearchOptionsModel(threshold=0.5, limit=0)
        options = model.to_options()
        assert options.threshold == 0.5
        assert options.limit is None

    def test_model_rejects_out_of_range(self):
        """Test pydantic range constraints."""
        with pytest.raises(PydanticValidationError):
            SearchOptionsModel(min_score=2)

    def test_model_rejects_unknown_keys(self):
        """Test that unknown keys are forbidden."""
        with pytest.raises(PydanticValidationError):
            SearchOptionsModel(treshold=0.5)


class TestValidators:
    """Test option building and config validation."""

    def test_build_with_overrides(self):
        """Test building options from overrides."""
        options = build_search_options(min_score=0.5, limit=10)
        assert options.min_score == 0.5
        assert options.limit == 10

    def test_build_rejects_invalid_values(self):
        """Test that invalid values raise ValidationError."""
        with pytest.raises(ValidationError, match="validation failed"):
            build_search_options(threshold=3)
        with pytest.raises(ValidationError, match="Limit must be an integer"):
            build_search_options(limit=2.5)

    def test_build_rejects_unknown_options(self):
        """Test that unknown option names are rejected."""
        with pytest.raises(ValidationError, match="Unknown search options"):
            build_search_options(fuzziness=2)

    def test_build_rejects_wrong_base(self):
        """Test that the base must be SearchOptions."""
        with pytest.raises(ValidationError, match="Invalid options type"):
            build_search_options({"limit": 3})  # type: ignore

    def test_config_mapping(self):
        """Test converting a config mapping."""
        options = options_from_config({"min_score": 0.45, "limit": "20"})
        assert options.min_score == 0.45
        assert options.limit == 20
        assert options_from_config(None) == SearchOptions()

    def test_config_errors(self):
        """Test config errors raised as ConfigurationError."""
        with pytest.raises(ConfigurationError):
            options_from_config({"min_score": "high"})
        with pytest.raises(ConfigurationError):
            options_from_config(["limit", 3])


class TestFieldUtilities:
    """Test nested value lookup and accessor resolution."""

    def test_nested_dict_value(self):
        """Test dot paths over nested dicts."""
        order = {"supplier": {"contact": {"email": "ap@acme.example"}}}
        assert get_nested_value(order, "supplier.contact.email") == "ap@acme.example"

    def test_missing_steps_return_empty_string(self):
        """Test that missing steps give an empty string."""
        order = {"supplier": None}
        assert get_nested_value(order, "supplier.contact.email") == ""
        assert get_nested_value(order, "customer") == ""
        assert get_nested_value(None, "name") == ""
        assert get_nested_value(order, "") == ""

    def test_sequence_index_and_attributes(self, sample_products):
        """Test integer indexes and attribute steps."""
        order = {"lines": [{"product": sample_products[0]}]}
        assert get_nested_value(order, "lines.0.product.sku") == "WM-1001"
        assert get_nested_value(order, "lines.5.product") == ""
        assert get_nested_value(order, "lines.first") == ""

    def test_resolve_variants(self):
        """Test resolving each field spec variant."""
        accessor = lambda item: item["x"]  # noqa: E731
        assert len(resolve_fields(None)) == 5
        assert len(resolve_fields("name")) == 1
        assert resolve_fields(accessor) == [accessor]

        mixed = resolve_fields(["name", accessor])
        assert mixed[0]({"name": "Acme"}) == "Acme"
        assert mixed[1] is accessor

    def test_default_accessor_first_truthy(self):
        """Test that default accessors take the first truthy value."""
        name_accessor = resolve_fields(None)[0]
        assert name_accessor({"name": "", "companyName": "Acme Ltd"}) == "Acme Ltd"
        assert name_accessor({}) == ""

    def test_to_text(self):
        """Test converting field values to text."""
        assert to_text(None) is None
        assert to_text(["a", 1, "b"]) == "a 1 b"
        assert to_text(42) == "42"

    def test_extract_text_swallows_errors(self):
        """Test that failing accessors yield no value."""
        def broken(item):
            raise KeyError("missing")

        assert extract_text({}, broken) is None

    def test_extract_text_strict(self):
        """Test strict extraction raising FieldAccessError."""
        def broken(item):
            raise KeyError("missing")

        with pytest.raises(FieldAccessError) as exc_info:
            extract_text({}, broken, strict=True)
        assert exc_info.value.field == "broken"


class TestHighlighting:
    """Test search term highlighting."""

    def test_highlight_segments(self):
        """Test splitting text into highlight segments."""
        segments = highlight_match("Johnson Wholesale", "john")
        assert segments == [
            HighlightSegment("John", matched=True),
            HighlightSegment("son Wholesale", matched=False),
        ]

    def test_multiple_occurrences(self):
        """Test marking every occurrence."""
        segments = highlight_match("pen, Pen, PEN", "pen")
        assert [s.text for s in segments if s.matched] == ["pen", "Pen", "PEN"]
        assert "".join(s.text for s in segments) == "pen, Pen, PEN"

    def test_regex_characters_are_literal(self):
        """Test that regex characters match literally."""
        segments = highlight_match("Price (USD)", "(usd)")
        assert segments == [HighlightSegment("Price "), HighlightSegment("(USD)", matched=True)]

    def test_empty_inputs(self):
        """Test highlighting with empty inputs."""
        assert highlight_match("", "x") == []
        assert highlight_match("Acme", "") == [HighlightSegment("Acme")]

    def test_html_rendering(self):
        """Test escaped HTML rendering."""
        rendered = highlight_html("A&B acme", "acme")
        assert rendered == 'A&amp;B <mark class="bg-yellow-200">acme</mark>'

    def test_html_custom_class(self):
        """Test a custom CSS class."""
        rendered = highlight_html("<b>Acme</b>", "acme", css_class="hl")
        assert rendered == '&lt;b&gt;<mark class="hl">Acme</mark>&lt;/b&gt;'
