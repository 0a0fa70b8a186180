"""Tests for the score fold and credibility classification."""

import itertools

import pytest

from beacon.data import (
    BiasAnalysis,
    ClaimVerdict,
    CredibilityLabel,
    Flag,
    ModelRated,
    ModelVerdict,
    Overall,
    RegistryRated,
    Unresolved,
)
from beacon.scoring import (
    ScoreState,
    aggregate,
    apply_bias,
    apply_verdict,
    classify,
    initial_state,
    overall_for,
)


@pytest.mark.parametrize(
    ("score", "label"),
    [
        (100, CredibilityLabel.EXCELLENT),
        (90, CredibilityLabel.EXCELLENT),
        (89, CredibilityLabel.HIGH),
        (70, CredibilityLabel.HIGH),
        (69, CredibilityLabel.MEDIUM),
        (40, CredibilityLabel.MEDIUM),
        (39, CredibilityLabel.LOW),
        (20, CredibilityLabel.LOW),
        (19, CredibilityLabel.VERY_LOW),
        (5, CredibilityLabel.VERY_LOW),
        (0, CredibilityLabel.VERY_LOW),
    ],
)
def test_classify_thresholds(score: int, label: CredibilityLabel) -> None:
    assert classify(score) is label


@pytest.mark.parametrize(
    ("risk_detected", "score"),
    list(itertools.product([True, False], range(0, 101, 7))) + [(False, 49), (False, 50)],
)
def test_overall_is_risk_iff_risk_detected_or_low_score(risk_detected: bool, score: int) -> None:
    expected = Overall.RISK if risk_detected or score < 50 else Overall.CLEAN
    assert overall_for(risk_detected, score) is expected


class TestInitialState:
    """Tests for initial_state."""

    def test_uses_bias_score(self) -> None:
        assert initial_state(BiasAnalysis(score=82)).score == 82

    def test_missing_score_uses_default(self) -> None:
        assert initial_state(BiasAnalysis()).score == 75
        assert initial_state(BiasAnalysis(), default_score=60).score == 60

    def test_zero_score_is_not_replaced(self) -> None:
        assert initial_state(BiasAnalysis(score=0)).score == 0

    def test_starts_without_flags_or_risk(self) -> None:
        state = initial_state(BiasAnalysis(score=90))
        assert state.flags == ()
        assert not state.risk_detected


class TestApplyBias:
    """Tests for apply_bias."""

    def test_signals_cap_at_forty_and_flag(self) -> None:
        bias = BiasAnalysis(score=85, signals=("Loaded Language", "Appeal to Emotion"))
        state = apply_bias(initial_state(bias), bias)

        assert state.score == 40
        assert state.risk_detected
        assert state.flags == (
            Flag(
                title="Propaganda & Bias Signals",
                reasons=("Loaded Language", "Appeal to Emotion"),
            ),
        )

    def test_signals_do_not_raise_low_score(self) -> None:
        bias = BiasAnalysis(score=25, signals=("Fear Mongering",))
        assert apply_bias(initial_state(bias), bias).score == 25

    def test_no_signals_adds_neutral_flag_with_explanation(self) -> None:
        bias = BiasAnalysis(score=88, explanation="Balanced, sourced reporting.")
        state = apply_bias(initial_state(bias), bias)

        assert state.score == 88
        assert not state.risk_detected
        assert state.flags == (
            Flag(title="AI Credibility Analysis", reasons=("Balanced, sourced reporting.",)),
        )

    def test_no_signals_no_explanation_uses_neutral_text(self) -> None:
        bias = BiasAnalysis(score=88)
        state = apply_bias(initial_state(bias), bias)
        assert state.flags[0].reasons == ("The text appears neutral in tone.",)


class TestApplyVerdict:
    """Tests for apply_verdict."""

    def test_registry_rated_caps_and_flags(self) -> None:
        state = apply_verdict(
            ScoreState(score=80),
            "Drinking bleach cures flu.",
            RegistryRated(rating="False", publisher="Reuters", ceiling=5),
        )

        assert state.score == 5
        assert state.risk_detected
        assert state.flags == (
            Flag(
                title='Fact-Check: Rated "False"',
                reasons=('Claim: "Drinking bleach cures flu."', "Publisher: Reuters"),
            ),
        )

    def test_registry_rated_true_still_flags_risk(self) -> None:
        """Any registry hit marks risk and caps at 30, whatever the rating."""
        state = apply_verdict(
            ScoreState(score=80),
            "claim",
            RegistryRated(rating="True", publisher="AP", ceiling=30),
        )
        assert state.score == 30
        assert state.risk_detected

    def test_model_false_caps_at_fifteen(self) -> None:
        state = apply_verdict(
            ScoreState(score=60),
            "claim",
            ModelRated(verdict=ModelVerdict.FALSE, explanation="Contradicted by NASA."),
        )

        assert state.score == 15
        assert state.risk_detected
        assert state.flags == (
            Flag(
                title="AI Fact-Check: Likely False",
                reasons=('Claim: "claim"', "Reasoning: Contradicted by NASA."),
            ),
        )

    @pytest.mark.parametrize(
        "verdict",
        [
            ModelRated(verdict=ModelVerdict.TRUE),
            ModelRated(verdict=ModelVerdict.UNPROVEN),
            Unresolved(),
        ],
    )
    def test_other_outcomes_leave_state_unchanged(self, verdict: ClaimVerdict) -> None:
        before = ScoreState(score=72, flags=(Flag(title="x"),))
        assert apply_verdict(before, "claim", verdict) == before


SIGNALS: list[ClaimVerdict] = [
    RegistryRated(rating="False", publisher="P", ceiling=5),
    RegistryRated(rating="Misleading", publisher="P", ceiling=20),
    RegistryRated(rating="Half True", publisher="P", ceiling=30),
    ModelRated(verdict=ModelVerdict.FALSE, explanation="e"),
    ModelRated(verdict=ModelVerdict.TRUE),
    ModelRated(verdict=ModelVerdict.UNPROVEN),
    Unresolved(),
]


@pytest.mark.parametrize("start", [0, 14, 15, 35, 75, 100])
@pytest.mark.parametrize("sequence", list(itertools.product(SIGNALS, repeat=2)))
def test_score_never_increases(start: int, sequence: tuple[ClaimVerdict, ...]) -> None:
    state = ScoreState(score=start)
    for verdict in sequence:
        after = apply_verdict(state, "claim", verdict)
        assert after.score <= state.score
        assert len(after.flags) >= len(state.flags)
        assert after.risk_detected or not state.risk_detected
        state = after


class TestAggregate:
    """Tests for the full fold."""

    def test_bias_then_claims_in_order(self) -> None:
        bias = BiasAnalysis(score=70, signals=("Loaded Language",))
        findings: list[tuple[str, ClaimVerdict]] = [
            ("first", RegistryRated(rating="Misleading", publisher="AFP", ceiling=20)),
            ("second", ModelRated(verdict=ModelVerdict.UNPROVEN)),
            ("third", ModelRated(verdict=ModelVerdict.FALSE, explanation="no")),
        ]

        state = aggregate(bias, findings)

        assert [f.title for f in state.flags] == [
            "Propaganda & Bias Signals",
            'Fact-Check: Rated "Misleading"',
            "AI Fact-Check: Likely False",
        ]
        assert state.flags[2].reasons[0] == 'Claim: "third"'
        assert state.score == 15

    def test_worst_evidence_dominates(self) -> None:
        bias = BiasAnalysis(score=95)
        findings: list[tuple[str, ClaimVerdict]] = [
            ("a", RegistryRated(rating="False", publisher="P", ceiling=5)),
            ("b", RegistryRated(rating="Half True", publisher="P", ceiling=30)),
        ]
        assert aggregate(bias, findings).score == 5

    def test_result_contract(self) -> None:
        state = aggregate(BiasAnalysis(score=92, explanation="Neutral."), [])
        result = state.to_result()

        assert result.overall is Overall.CLEAN
        assert result.credibility is not None
        assert result.credibility.score == 92
        assert result.credibility.label is CredibilityLabel.EXCELLENT

    def test_low_bias_score_alone_is_risk(self) -> None:
        result = aggregate(BiasAnalysis(score=45), []).to_result()
        assert result.overall is Overall.RISK
        assert result.credibility is not None
        assert result.credibility.label is CredibilityLabel.MEDIUM
