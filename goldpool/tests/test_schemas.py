import unittest
from decimal import Decimal

from pydantic import ValidationError

from drawengine.types import ItemType
from goldpool.schemas import PoolSetupRequest, SpinRequest


def pool_payload(**overrides):
    payload = {
        "participants": ["Ayşe", "Fatma", "Zeynep"],
        "item_type": "PRECIOUS_METAL",
        "specific_item": "ALTIN",
        "monthly_amount": "2.5",
        "duration_months": 3,
        "start_month": 12,
        "start_year": 2024,
    }
    payload.update(overrides)
    return payload


class PoolSetupRequestTests(unittest.TestCase):
    def _messages(self, **overrides):
        with self.assertRaises(ValidationError) as ctx:
            PoolSetupRequest(**pool_payload(**overrides))
        return " ".join(error["msg"] for error in ctx.exception.errors())

    def test_valid_payload_builds_configuration(self):
        request = PoolSetupRequest(**pool_payload(participants=["  Ayşe ", "Fatma", "Zeynep"]))
        config = request.to_config()

        self.assertEqual(config.participant_names, ("Ayşe", "Fatma", "Zeynep"))
        self.assertEqual(config.participant_count, 3)
        self.assertEqual(config.item_type, ItemType.PRECIOUS_METAL)
        self.assertEqual(config.monthly_amount, Decimal("2.5"))
        self.assertEqual(len({p.id for p in config.participants}), 3)

    def test_participant_count_defaults_to_list_length(self):
        request = PoolSetupRequest(**pool_payload())
        self.assertEqual(request.participant_count, 3)

    def test_participant_count_must_match_names(self):
        self.assertIn("does not match", self._messages(participant_count=4))

    def test_requires_two_participants(self):
        self.assertIn("At least 2 participants", self._messages(participants=["Ayşe"]))

    def test_rejects_blank_names(self):
        self.assertIn("must not be blank", self._messages(participants=["Ayşe", "   "]))

    def test_rejects_duplicate_names_ignoring_case(self):
        self.assertIn("must be unique", self._messages(participants=["Ayşe", "AYŞE"]))

    def test_specific_item_required_unless_cash(self):
        self.assertIn("specific item", self._messages(specific_item=" "))
        self.assertIn(
            "specific item",
            self._messages(item_type="FOREIGN_CURRENCY", specific_item=""),
        )

        cash = PoolSetupRequest(**pool_payload(item_type="CASH", specific_item=""))
        self.assertEqual(cash.item_type, ItemType.CASH)

    def test_numeric_bounds(self):
        self._messages(monthly_amount="-1")
        self._messages(duration_months=0)
        self._messages(start_month=13)
        self._messages(start_year=0)

    def test_unknown_item_type(self):
        self._messages(item_type="SILVER")


class SpinRequestTests(unittest.TestCase):
    def test_angle_is_optional(self):
        self.assertIsNone(SpinRequest().final_angle)
        self.assertEqual(SpinRequest(final_angle=-45).final_angle, -45.0)

    def test_non_finite_angles_rejected(self):
        with self.assertRaises(ValidationError):
            SpinRequest(final_angle=float("nan"))
        with self.assertRaises(ValidationError):
            SpinRequest(final_angle=float("inf"))


if __name__ == "__main__":
    unittest.main()
