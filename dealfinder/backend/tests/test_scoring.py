# tests/test_scoring.py
from dataclasses import dataclass

from app.domain.rules import DEFAULT_RULES, ScoringContext, js_round
from app.domain.scoring import PRICE_UNAVAILABLE, average_price, score_listing, score_listings
from app.domain.types import Condition


def test_cheap_like_new_boxed_listings_clamp_to_ten(make_listing):
    listings = [
        make_listing(100, condition=Condition.like_new, description="original box", listed_days_ago=1),
        make_listing(100, condition=Condition.like_new, description="original box", listed_days_ago=1),
        make_listing(1000, condition=Condition.like_new, description="original box", listed_days_ago=1),
    ]
    scored = score_listings(listings)

    assert [s.deal_score for s in scored] == [10, 10, 9]
    assert scored[0].reasoning == (
        "Excellent price - 75% below average. "
        "Item is in excellent condition. "
        "Recently listed - act fast! "
        "Includes extras or original packaging."
    )
    assert scored[2].reasoning.startswith("Fair price - in line with market value. ")


def test_motivated_seller_adds_text_but_no_points(make_listing):
    listing = make_listing(
        200,
        condition=Condition.fair,
        description="Moving sale, must sell",
        listed_days_ago=10,
    )
    (scored,) = score_listings([listing])

    assert scored.deal_score == 5
    assert scored.reasoning == (
        "Fair price - in line with market value. "
        "Seller is motivated - good negotiation opportunity."
    )


def test_empty_input_scores_nothing():
    assert score_listings([]) == []
    assert average_price([]) is None


def test_good_price_tier(make_listing):
    # avg = 100; 85 < 90 but not < 70
    listings = [make_listing(85), make_listing(115)]
    scored = score_listings(listings)

    assert scored[0].deal_score == 6
    assert scored[0].reasoning == "Good price - below average market value."
    assert scored[1].deal_score == 5


def test_price_at_seventy_percent_is_only_good(make_listing):
    ctx = ScoringContext(avg_price=100.0)
    scored = score_listing(make_listing(70), ctx)
    assert scored.deal_score == 6


def test_very_good_condition(make_listing):
    (scored,) = score_listings([make_listing(condition=Condition.very_good)])
    assert scored.deal_score == 6
    assert "Item is in very good condition." in scored.reasoning


def test_packaging_match_is_case_sensitive(make_listing):
    (upper,) = score_listings([make_listing(description="Comes in the Box")])
    (lower,) = score_listings([make_listing(description="all accessories included")])

    assert upper.deal_score == 5
    assert lower.deal_score == 6


def test_urgency_match_is_case_insensitive(make_listing):
    (scored,) = score_listings([make_listing(description="MUST SELL this week")])
    assert scored.reasoning.endswith("Seller is motivated - good negotiation opportunity.")
    assert scored.deal_score == 5


def test_recency_boundary(make_listing):
    two, three = score_listings([make_listing(listed_days_ago=2), make_listing(listed_days_ago=3)])
    assert two.deal_score == 6
    assert three.deal_score == 5


def test_malformed_price_scores_at_base_and_is_left_out_of_average(make_listing):
    listings = [
        make_listing("ask", condition=Condition.like_new, listed_days_ago=0),
        make_listing(100),
        make_listing(300),
    ]
    assert average_price(listings) == 200

    broken, cheap, pricey = score_listings(listings)
    assert broken.deal_score == 5
    assert broken.reasoning == PRICE_UNAVAILABLE
    # 100 < 200 * 0.7
    assert cheap.reasoning.startswith("Excellent price - 50% below average.")
    assert pricey.deal_score == 5


def test_no_parseable_price_at_all(make_listing):
    scored = score_listings([make_listing(None), make_listing("n/a")])
    assert [s.deal_score for s in scored] == [5, 5]


def test_unknown_condition_gets_no_bonus(make_listing):
    (scored,) = score_listings([make_listing(condition="Mint")])
    assert scored.deal_score == 5
    assert "condition" not in scored.reasoning


def test_condition_given_as_plain_text_still_matches(make_listing):
    (scored,) = score_listings([make_listing(condition="Like New")])
    assert scored.deal_score == 7


@dataclass(frozen=True)
class _ExplodingRule:
    name: str = "explodes"

    def evaluate(self, listing, price, ctx):
        raise RuntimeError("boom")


def test_failing_rule_is_skipped_for_that_listing_only(make_listing):
    rules = (_ExplodingRule(),) + DEFAULT_RULES
    scored = score_listings([make_listing(100, listed_days_ago=1), make_listing(100)], rules=rules)

    assert [s.deal_score for s in scored] == [6, 5]
    assert scored[0].reasoning.startswith("Fair price")


def test_scoring_is_repeatable(make_listing):
    listings = [
        make_listing(120, condition=Condition.excellent),
        make_listing(480, description="box", listed_days_ago=1),
        make_listing(300, condition=Condition.very_good),
    ]
    first = score_listings(listings)
    second = score_listings(listings)

    assert [(s.deal_score, s.reasoning) for s in first] == [(s.deal_score, s.reasoning) for s in second]


def test_js_round_rounds_halves_up():
    assert js_round(74.5) == 75
    assert js_round(74.4) == 74
    assert js_round(-2.5) == -2
