import unittest

from ticketreport.config import Settings
from ticketreport.models import PriceStats, Ticket
from ticketreport.processing.route import RouteProcessor

ROUTE = Settings(
    origin_name="Владивосток",
    destination_name="Тель-Авив",
    origin_tz="Asia/Vladivostok",
    destination_tz="Asia/Jerusalem",
)


def _ticket(dep_date="12.05.18", dep_time="16:20", arr_date="12.05.18", arr_time="22:10",
            carrier="TK", price=12400, origin_name="Владивосток", destination_name="Тель-Авив") -> Ticket:
    return Ticket("VVO", origin_name, "TLV", destination_name, dep_date, dep_time,
                  arr_date, arr_time, carrier, price=price)


class TestRouteFilter(unittest.TestCase):
    def test_match_is_case_insensitive_and_trimmed(self) -> None:
        processor = RouteProcessor(ROUTE)
        tickets = [
            _ticket(carrier="A", origin_name="  владивосток ", destination_name="ТЕЛЬ-АВИВ\t"),
            _ticket(carrier="B", origin_name="Москва"),
            _ticket(carrier="C", destination_name=None),
            _ticket(carrier="D"),
        ]
        self.assertEqual(["A", "D"], [t.carrier for t in processor.select_route(tickets)])


class TestFlightMinutes(unittest.TestCase):
    def test_summer_duration_uses_israeli_daylight_time(self) -> None:
        # VVO UTC+10, TLV UTC+3 in May: 06:20Z -> 19:10Z
        self.assertEqual(12 * 60 + 50, RouteProcessor(ROUTE).flight_minutes(_ticket()))

    def test_winter_duration_uses_israeli_standard_time(self) -> None:
        ticket = _ticket(dep_date="12.01.19", dep_time="10:00", arr_date="12.01.19", arr_time="10:00")
        self.assertEqual(8 * 60, RouteProcessor(ROUTE).flight_minutes(ticket))

    def test_overnight_arrival(self) -> None:
        ticket = _ticket(dep_time="17:20", arr_date="13.05.18", arr_time="2:50")
        self.assertEqual(16 * 60 + 30, RouteProcessor(ROUTE).flight_minutes(ticket))

    def test_swapping_zones_shifts_by_twice_the_offset_difference(self) -> None:
        swapped = Settings(origin_tz="Asia/Jerusalem", destination_tz="Asia/Vladivostok")
        for ticket, offset_hours in (
            (_ticket(dep_date="12.01.19", dep_time="10:00", arr_date="12.01.19", arr_time="10:00"), 8),
            (_ticket(), 7),
        ):
            with self.subTest(ticket=ticket):
                forward = RouteProcessor(ROUTE).flight_minutes(ticket)
                backward = RouteProcessor(swapped).flight_minutes(ticket)
                self.assertEqual(2 * offset_hours * 60, forward - backward)

    def test_whitespace_inside_values_is_ignored(self) -> None:
        ticket = _ticket(dep_date=" 12. 05.18", dep_time="16 : 20 ", arr_date="12.05.18\n", arr_time=" 22:10")
        self.assertEqual(12 * 60 + 50, RouteProcessor(ROUTE).flight_minutes(ticket))

    def test_single_digit_day_month_and_two_digit_year(self) -> None:
        processor = RouteProcessor(ROUTE)
        self.assertEqual(2099, processor._parse_date("1.1.99").year)
        ticket = _ticket(dep_date="1.2.19", dep_time="0:00", arr_date="1.2.19", arr_time="0:00")
        self.assertEqual(8 * 60, processor.flight_minutes(ticket))

    def test_negative_duration_passes_through(self) -> None:
        ticket = _ticket(dep_date="12.01.19", dep_time="10:00", arr_date="12.01.19", arr_time="1:00")
        with self.assertLogs(level="WARNING"):
            self.assertEqual(-60, RouteProcessor(ROUTE).flight_minutes(ticket))

    def test_arrival_in_spring_forward_gap_is_shifted_past_it(self) -> None:
        # Israel skips 02:00-03:00 on 23.03.18; 2:30 is read as 03:30 IDT = 00:30Z
        ticket = _ticket(dep_date="23.03.18", dep_time="8:30", arr_date="23.03.18", arr_time="2:30")
        self.assertEqual(120, RouteProcessor(ROUTE).flight_minutes(ticket))

    def test_ambiguous_arrival_takes_the_earlier_offset(self) -> None:
        # 01:00-02:00 repeats on 28.10.18; 1:30 is read as IDT (+3) = 22:30Z the day before
        ticket = _ticket(dep_date="28.10.18", dep_time="6:30", arr_date="28.10.18", arr_time="1:30")
        self.assertEqual(120, RouteProcessor(ROUTE).flight_minutes(ticket))

    def test_same_zone_on_both_ends_still_uses_offsets(self) -> None:
        same_zone = Settings(origin_tz="Asia/Jerusalem", destination_tz="Asia/Jerusalem")
        ticket = _ticket(dep_date="23.03.18", dep_time="1:00", arr_date="23.03.18", arr_time="4:00")
        self.assertEqual(120, RouteProcessor(same_zone).flight_minutes(ticket))

    def test_malformed_values_fail(self) -> None:
        processor = RouteProcessor(ROUTE)
        for ticket in (
            _ticket(dep_date="2018-05-12"),
            _ticket(arr_time="22.10"),
            _ticket(arr_time="22:5"),
            _ticket(dep_date="12.05.2018"),
            _ticket(dep_time=None),
        ):
            with self.subTest(ticket=ticket):
                with self.assertRaises(ValueError):
                    processor.flight_minutes(ticket)


class TestAggregation(unittest.TestCase):
    def test_minimum_duration_per_carrier(self) -> None:
        tickets = [
            _ticket(carrier="SU", dep_time="9:40", arr_time="20:40"),  # 18h00m
            _ticket(carrier="TK"),  # 12h50m
            _ticket(carrier="SU", dep_time="17:20", arr_date="13.05.18", arr_time="2:50"),  # 16h30m
        ]
        minimums = RouteProcessor(ROUTE).min_duration_by_carrier(tickets)
        self.assertEqual({"SU": 16 * 60 + 30, "TK": 12 * 60 + 50}, minimums)
        self.assertEqual(["SU", "TK"], list(minimums))

    def test_carriers_are_sorted_and_missing_carrier_is_reported(self) -> None:
        tickets = [_ticket(carrier="TK"), _ticket(carrier=None), _ticket(carrier="BA")]
        self.assertEqual(["BA", "N/A", "TK"], list(RouteProcessor(ROUTE).min_duration_by_carrier(tickets)))

    def test_price_stats_odd_count(self) -> None:
        stats = RouteProcessor(ROUTE).price_stats([15000, 10000, 12400])
        self.assertAlmostEqual(12466.6666667, stats.mean, places=5)
        self.assertEqual(12400.0, stats.median)
        self.assertAlmostEqual(66.6666667, stats.difference, places=5)
        self.assertEqual(3, stats.count)

    def test_price_stats_even_count(self) -> None:
        stats = RouteProcessor(ROUTE).price_stats([4, 1, 3, 2])
        self.assertEqual(PriceStats(mean=2.5, median=2.5, difference=0.0, count=4), stats)

    def test_equal_prices_have_zero_difference(self) -> None:
        self.assertEqual(0.0, RouteProcessor(ROUTE).price_stats([7000] * 5).difference)

    def test_price_stats_require_prices(self) -> None:
        with self.assertRaises(ValueError):
            RouteProcessor(ROUTE).price_stats([])

    def test_process_tickets(self) -> None:
        tickets = [_ticket(price=10000), _ticket(price=15000, carrier="SU"), _ticket(origin_name="Москва")]
        report = RouteProcessor(ROUTE).process_tickets(tickets)
        self.assertEqual(2, report.ticket_count)
        self.assertEqual({"SU": 770, "TK": 770}, report.min_durations)
        self.assertEqual(12500.0, report.prices.median)

    def test_process_tickets_without_matches(self) -> None:
        self.assertIsNone(RouteProcessor(ROUTE).process_tickets([_ticket(origin_name="Москва")]))


if __name__ == "__main__":
    unittest.main()
