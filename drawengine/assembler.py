from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Union

from .errors import MissingParticipant
from .locales import DEFAULT_LANGUAGE
from .months import sequence_months
from .payout import compute_amount, format_amount
from .types import DrawResultRecord, DrawState, Participant, PoolConfiguration


class ResultAssembler:
    """Turns a finished draw into the records handed to a result store."""

    def __init__(
        self,
        language: str = DEFAULT_LANGUAGE,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._language = language
        self._logger = logger or logging.getLogger("goldpool.assembler")

    @property
    def language(self) -> str:
        return self._language

    def assemble(
        self,
        winners: Union[DrawState, Sequence[str]],
        config: PoolConfiguration,
    ) -> List[DrawResultRecord]:
        """Build one record per winner, in draw order.

        Parameters
        ----------
        winners : DrawState or Sequence[str]
            Winner names in the order they were drawn, or the engine snapshot
            holding them.
        config : PoolConfiguration
            Pool whose participants, amount and start month apply.

        Returns
        -------
        list[DrawResultRecord]
            The ``n``-th winner is paid in the ``n``-th month from the start.

        Raises
        ------
        MissingParticipant
            If a winner name does not belong to ``config``.
        """

        names = list(winners.winners if isinstance(winners, DrawState) else winners)
        by_name = self._index_participants(config.participants)

        amount = format_amount(
            compute_amount(config),
            config.item_type,
            config.specific_item,
            self._language,
        )
        months = sequence_months(config.start_month, config.start_year, len(names), self._language)

        records: List[DrawResultRecord] = []
        for name, month in zip(names, months):
            participant = by_name.get(name)
            if participant is None:
                raise MissingParticipant(name)
            records.append(
                DrawResultRecord(
                    participant_id=participant.id,
                    participant_name=participant.name,
                    month=month,
                    amount=amount,
                )
            )

        self._logger.info("Assembled %s draw results (%s each)", len(records), amount)
        return records

    @staticmethod
    def _index_participants(participants: Sequence[Participant]) -> Dict[str, Participant]:
        index: Dict[str, Participant] = {}
        for participant in participants:
            # First entry wins should a caller bypass name validation.
            index.setdefault(participant.name, participant)
        return index


__all__ = ["ResultAssembler"]
