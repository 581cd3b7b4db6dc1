import pytest

from sel4kit.formatting import Console, cformat


def test_plain_text_passes_through():
    assert cformat("hello world") == "hello world"


def test_double_percent_prints_percent():
    assert cformat("100%%") == "100%"


def test_string_conversion():
    assert cformat("<%s>", "abc") == "<abc>"


def test_string_stops_at_nul():
    assert cformat("%s", "ab\0cd") == "ab"


def test_zero_prints_single_digit():
    assert cformat("%d %x %lu", 0, 0, 0) == "0 0 0"


def test_decimal_and_hex():
    assert cformat("%d:%x", 42, 0xBEEF) == "42:beef"


def test_width_modifiers_are_ignored():
    assert cformat("%08x|%-5d|%.3u", 0x1F, 7, 9) == "1f|7|9"


def test_negative_int_is_widened_unsigned():
    assert cformat("%d", -1) == "18446744073709551615"
    assert cformat("%x", -1) == "ffffffffffffffff"


def test_int_conversion_truncates_to_32_bits():
    assert cformat("%x", 0x1_0000_0012) == "12"


def test_long_and_size_conversions():
    assert cformat("%lx %llu %zx %zd", 0xABCDEF0123, 123, 0xFF, 5) == "abcdef0123 123 ff 5"


def test_pointer_is_hex():
    assert cformat("%p", 0xDEAD) == "dead"


def test_character_conversion():
    assert cformat("%c%c", 65, "z") == "Az"


def test_unknown_conversion_consumes_no_argument():
    assert cformat("%q%d", 7) == "?7"


def test_unknown_long_and_size_suffix():
    assert cformat("%lq%zq%llq") == "???"


def test_trailing_percent_prints_nothing():
    assert cformat("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        cformat("%d %d", 1)


def test_console_printf_inserts_cr_and_counts():
    out = []
    console = Console(putchar=out.append)
    count = console.printf("a%s\nb", "x")
    assert count == len("ax\nb")
    assert "".join(map(chr, out)) == "ax\r\nb"


def test_console_puts_appends_newline():
    out = []
    console = Console(putchar=out.append)
    assert console.puts("hi") == len("hi\n")
    assert "".join(map(chr, out)) == "hi\r\n"


def test_console_default_writes_stdout(capsys):
    count = Console().printf("v%d", 3)
    assert capsys.readouterr().out == "v3"
    assert count == 2