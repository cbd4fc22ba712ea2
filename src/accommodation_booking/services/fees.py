"""Agent fee calculation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FeePolicy:
    """First-is-higher pricing for agent fees."""

    first_check_in_fee: int = 10
    subsequent_check_in_fee: int = 5
    first_reservation_fee_hint: int = 10
    subsequent_reservation_fee_hint: int = 5

    def compute_check_in_fee(self, prior_check_in_count: int) -> int:
        """Return the fee owed for a check-in given earlier check-ins."""
        if prior_check_in_count < 0:
            raise ValueError("prior_check_in_count must not be negative")
        if prior_check_in_count == 0:
            return self.first_check_in_fee
        return self.subsequent_check_in_fee

    def next_reservation_fee_hint(self, current_hint: int) -> int:
        """Return the agent fee shown after a reservation.

        The hint is independent from the check-in fee: it only looks at
        whether a reservation hint was ever shown in this session.
        """
        if current_hint == 0:
            return self.first_reservation_fee_hint
        return self.subsequent_reservation_fee_hint


def compute_check_in_fee(prior_check_in_count: int) -> int:
    """Return the check-in fee under the default policy."""
    return _DEFAULT_POLICY.compute_check_in_fee(prior_check_in_count)


_DEFAULT_POLICY = FeePolicy()
