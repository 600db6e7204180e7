import unittest
from decimal import Decimal

from drawengine.assembler import ResultAssembler
from drawengine.engine import DrawEngine
from drawengine.errors import MissingParticipant
from drawengine.types import ItemType, Participant, PoolConfiguration


def make_config(item_type=ItemType.CASH, specific_item="", monthly="1000", duration=3) -> PoolConfiguration:
    participants = (
        Participant(id="a-1", name="A"),
        Participant(id="b-2", name="B"),
        Participant(id="c-3", name="C"),
    )
    return PoolConfiguration(
        participant_count=3,
        participants=participants,
        item_type=item_type,
        specific_item=specific_item,
        monthly_amount=Decimal(monthly),
        duration_months=duration,
        start_month=11,
        start_year=2024,
    )


class ResultAssemblerTests(unittest.TestCase):
    def test_assembles_records_in_winner_order(self) -> None:
        records = ResultAssembler().assemble(["B", "C", "A"], make_config())

        self.assertEqual([r.participant_id for r in records], ["b-2", "c-3", "a-1"])
        self.assertEqual([r.participant_name for r in records], ["B", "C", "A"])
        self.assertEqual(
            [r.month for r in records],
            ["November 2024", "December 2024", "January 2025"],
        )
        self.assertEqual({r.amount for r in records}, {"1,000.00 ₺"})

    def test_accepts_engine_snapshot(self) -> None:
        engine = DrawEngine(["A", "B", "C"])
        engine.spin(200)
        engine.spin(90)
        records = ResultAssembler(language="tr").assemble(engine.snapshot(), make_config())

        self.assertEqual([r.participant_name for r in records], ["B", "C", "A"])
        self.assertEqual(records[0].month, "Kasım 2024")
        self.assertEqual(records[2].month, "Ocak 2025")
        self.assertEqual(records[0].amount, "1.000,00 ₺")

    def test_same_amount_for_every_position(self) -> None:
        config = make_config(ItemType.PRECIOUS_METAL, "ALTIN", monthly="10", duration=2)
        records = ResultAssembler().assemble(["C", "A", "B"], config)
        # 10 * 2 / 3 = 6.67 pieces, shown as whole pieces
        self.assertEqual([r.amount for r in records], ["7 ALTIN"] * 3)

    def test_unknown_winner_raises(self) -> None:
        with self.assertRaises(MissingParticipant) as ctx:
            ResultAssembler().assemble(["B", "Z"], make_config())
        self.assertEqual(ctx.exception.name, "Z")

    def test_ids_are_unique_and_complete(self) -> None:
        config = make_config()
        records = ResultAssembler().assemble(["A", "C", "B"], config)
        ids = [r.participant_id for r in records]
        self.assertEqual(len(set(ids)), len(ids))
        self.assertEqual(set(ids), {p.id for p in config.participants})


if __name__ == "__main__":
    unittest.main()
