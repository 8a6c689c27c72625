from filterscope.tools.formatting import fmt_tick, format_root, format_roots


def test_format_root() -> None:
    assert format_root(1 - 2j) == "+1.000000 -2.000000j"


def test_format_roots_joins_lines() -> None:
    assert format_roots([0.5 + 0j, -1j]) == "+0.500000 +0.000000j\n-0.000000 -1.000000j"


def test_format_roots_empty() -> None:
    assert format_roots([]) == "(none)"
    assert format_roots(None) == "(none)"


def test_fmt_tick_ranges() -> None:
    assert fmt_tick(0.005) == "5.00e-03"
    assert fmt_tick(25_000.0) == "2.50e+04"
    assert fmt_tick(150.4) == "150"
    assert fmt_tick(12.34) == "12.3"
    assert fmt_tick(1.234) == "1.23"
    assert fmt_tick(0.0) == "0.00"
