from django.test import SimpleTestCase, override_settings

from duocore.apps.entries.services.field_map import AthleteData, DuoData, Submission
from duocore.apps.entries.services.scoring import (
    DEFAULT_WEIGHTS,
    ScoreWeights,
    completeness_score,
    configured_weights,
)


def full_submission(**overrides) -> Submission:
    data = dict(
        athlete1=AthleteData(name="Ana", email="ana@example.com", kit="M Feminino"),
        athlete2=AthleteData(name="Bia", email="bia@example.com", kit="P Feminino"),
        duo=DuoData(name="As Rápidas", category="Elite", instagram="@asrapidas"),
        consent=True,
    )
    data.update(overrides)
    return Submission(**data)


class CompletenessScoreTest(SimpleTestCase):
    def test_full_entry_is_clamped_to_100(self):
        self.assertEqual(completeness_score(full_submission(), ".pdf"), 100)

    def test_missing_consent_on_full_entry(self):
        self.assertEqual(completeness_score(full_submission(consent=False), ".png"), 80)

    def test_empty_submission(self):
        # base 50 - 20 sin consentimiento
        self.assertEqual(completeness_score(Submission(), ""), 30)

    def test_extension_variants(self):
        sub = Submission(duo=DuoData(category="Elite"), consent=True)
        self.assertEqual(completeness_score(sub, ".PDF"), 70)
        self.assertEqual(completeness_score(sub, "jpeg"), 70)
        self.assertEqual(completeness_score(sub, ".gif"), 60)

    def test_partial_pairs_do_not_count(self):
        sub = full_submission(athlete2=AthleteData(name="Bia"))
        # sin email ni kit del atleta 2: 50 + 10 + 10 + 10 + 5
        self.assertEqual(completeness_score(sub, ".pdf"), 85)

    def test_always_within_bounds(self):
        harsh = ScoreWeights(base=0, missing_consent=-500)
        generous = ScoreWeights(base=500)
        for consent in (True, False):
            for ext in ("", ".pdf"):
                sub = full_submission(consent=consent)
                for w in (DEFAULT_WEIGHTS, harsh, generous):
                    s = completeness_score(sub, ext, w)
                    self.assertGreaterEqual(s, 0)
                    self.assertLessEqual(s, 100)
                    s = completeness_score(Submission(consent=consent), ext, w)
                    self.assertGreaterEqual(s, 0)
                    self.assertLessEqual(s, 100)


class ConfiguredWeightsTest(SimpleTestCase):
    def test_defaults(self):
        self.assertEqual(configured_weights({}), DEFAULT_WEIGHTS)
        self.assertEqual(DEFAULT_WEIGHTS.base, 50)
        self.assertEqual(DEFAULT_WEIGHTS.duo_instagram, 5)
        self.assertEqual(DEFAULT_WEIGHTS.missing_consent, -20)

    @override_settings(DUO_SCORE_WEIGHTS={"duo_instagram": 0})
    def test_settings_override(self):
        self.assertEqual(configured_weights().duo_instagram, 0)
        self.assertEqual(configured_weights().base, 50)

    def test_unknown_weight_rejected(self):
        with self.assertRaises(ValueError):
            configured_weights({"telefone": 10})
