from uk_travel_history.extract.record_parser import parse_record_line, parse_travel_records
from uk_travel_history.models import Direction
from uk_travel_history.normalize.ports import format_route, resolve_route


SAMPLE_EXPORT = """\
Travel history for applicant
Date        Voyage      Direction  Embark  Code  Disembark
20/01/2024  BA0305      Inbound    CDG     0     LHR
15/01/2024  BA0304      Outbound   LHR     0     CDG
15/01/2024  BA0304      Outbound   LHR     0     CDG
Page 1 of 1
"""


def test_parses_and_sorts_records():
    records = parse_travel_records(SAMPLE_EXPORT)
    assert [(r.date, r.direction) for r in records] == [
        ("2024-01-15", Direction.OUTBOUND),
        ("2024-01-20", Direction.INBOUND),
    ]


def test_routes_use_port_names():
    records = parse_travel_records(SAMPLE_EXPORT)
    assert records[0].route == "London Heathrow → Paris CDG"
    assert records[1].route == "Paris CDG → London Heathrow"
    assert records[0].port == "CDG"


def test_dedup_keeps_first_seen():
    text = (
        "10/03/2024 AAA111 Outbound LHR 0 AMS\n"
        "10/03/2024 BBB222 Outbound LGW 0 BCN\n"
    )
    records = parse_travel_records(text)
    assert len(records) == 1
    assert records[0].route == "London Heathrow → Amsterdam"


def test_same_day_different_directions_both_survive():
    text = (
        "10/03/2024 AAA111 Outbound LHR 0 AMS\n"
        "10/03/2024 AAA112 Inbound AMS 0 LHR\n"
    )
    records = parse_travel_records(text)
    assert [r.direction for r in records] == [Direction.OUTBOUND, Direction.INBOUND]


def test_direction_is_case_insensitive():
    record = parse_record_line("01/05/2024 XY1 OUTBOUND MAN 0 FRA")
    assert record.direction == Direction.OUTBOUND
    record = parse_record_line("01/05/2024 XY1 inbound FRA 0 MAN")
    assert record.direction == Direction.INBOUND


def test_skips_lines_with_invalid_dates():
    text = (
        "31/02/2024 BA1 Outbound LHR 0 CDG\n"
        "01/03/2024 BA2 Inbound CDG 0 LHR\n"
    )
    records = parse_travel_records(text)
    assert len(records) == 1
    assert records[0].date == "2024-03-01"


def test_skips_lines_with_non_ascii_digits():
    text = (
        "\u0661\u0665/\u0660\u0661/\u0662\u0660\u0662\u0664 BA1 Outbound LHR 0 CDG\n"
        "01/03/2024 BA2 Inbound CDG 0 LHR\n"
    )
    records = parse_travel_records(text)
    assert [r.date for r in records] == ["2024-03-01"]


def test_empty_input():
    assert parse_travel_records("") == []
    assert parse_travel_records("no crossings here\n\n") == []


def test_records_span_years():
    text = (
        "05/01/2024 BA1 Inbound CDG 0 LHR\n"
        "20/12/2023 BA2 Outbound LHR 0 CDG\n"
    )
    records = parse_travel_records(text)
    assert [r.date for r in records] == ["2023-12-20", "2024-01-05"]


def test_stena_line_override():
    out = parse_record_line("01/06/2024 StenaLine-Britannica Outbound GBHRW 0 NLHVH")
    back = parse_record_line("08/06/2024 STENALINE Inbound NLHVH 0 GBHRW")
    assert out.route == "Harwich → Hook of Holland (Ferry)"
    assert back.route == "Hook of Holland → Harwich (Ferry)"


def test_eurostar_override_by_voyage_or_port():
    by_voyage = parse_record_line("01/07/2024 9F1111 Outbound XXX 0 YYY")
    by_port = parse_record_line("05/07/2024 ES9014 Outbound GBSPX 0 FRPNO")
    inbound = parse_record_line("09/07/2024 9F1111 Inbound FRPNO 0 GBSPX")
    assert by_voyage.route == "St Pancras (Eurostar/Ferry)"
    assert by_port.route == "St Pancras (Eurostar/Ferry)"
    assert inbound.route == "St Pancras arrival"


def test_format_route_placeholders():
    assert format_route("LHR", "0", Direction.OUTBOUND) == "London Heathrow"
    assert format_route("0", "BCN", Direction.INBOUND) == "Barcelona"
    assert format_route("0", "0", Direction.OUTBOUND) == "UK departure"
    assert format_route("", "", Direction.INBOUND) == "UK arrival"


def test_format_route_unknown_codes_fall_back_to_code():
    assert format_route("ZZZ", "LHR", Direction.INBOUND) == "ZZZ → London Heathrow"


def test_resolve_route_without_override():
    assert resolve_route("BA1", "EDI", "HEL", Direction.OUTBOUND) == "Edinburgh → Helsinki"
