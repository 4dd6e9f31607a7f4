import pytest

from mobus.fleet.domain.value_object import SeatLayout, SeatNumber
from mobus.shared.domain.exception import InvalidSeatNumberException


class TestSeatLayout:
    def test_last_row_is_truncated_at_total_seats(self):
        """38 席のバスは 10B で終わる"""
        layout = SeatLayout(38)
        assert layout.contains(SeatNumber("10B"))
        assert not layout.contains(SeatNumber("10C"))

    def test_parse_returns_seat_numbers_in_request_order(self):
        seats = SeatLayout(40).parse(["3b", "1A"])
        assert seats == [SeatNumber("3B"), SeatNumber("1A")]

    def test_parse_empty_list_raises_error(self):
        with pytest.raises(InvalidSeatNumberException, match="At least one seat"):
            SeatLayout(40).parse([])

    def test_parse_out_of_range_seat_raises_error(self):
        with pytest.raises(InvalidSeatNumberException, match="out of range"):
            SeatLayout(40).parse(["1A", "11A"])

    def test_parse_duplicate_seat_raises_error(self):
        with pytest.raises(InvalidSeatNumberException, match="requested twice"):
            SeatLayout(40).parse(["1A", "1a"])

    def test_non_positive_total_seats_raises_error(self):
        with pytest.raises(ValueError, match="Total seats must be positive"):
            SeatLayout(0)
