from servercore.dump import hex_dump, storage_dump, text_dump


def test_storage_dump_small():
    assert storage_dump(bytes([1, 2, 255])) == "STORAGE_SIZE: 3\n1 - 2 - 255 - "


def test_storage_dump_empty():
    assert storage_dump(b"") == "STORAGE_SIZE: 0\n"


def test_storage_dump_time_padding():
    out = storage_dump(b"\x07", include_time=True)
    assert out.startswith("STORAGE_SIZE: 1\n         ")
    assert out.endswith("7 - ")


def test_text_dump_roundtrip():
    data = b"hello\x00world"
    out = text_dump(data)
    body = out.split("\n", 1)[1]
    assert body.encode("latin-1") == data


def test_hex_dump_two_lines():
    out = hex_dump(bytes(range(17)))
    assert out == (
        "STORAGE_SIZE: 17\n"
        "00 01 02 03 04 05 06 07 | 08 09 0A 0B 0C 0D 0E 0F \n10 "
    )


def test_hex_dump_bar_and_line_counts():
    data = bytes(range(48))
    out = hex_dump(data)
    body = out.split("\n", 1)[1]
    assert body.count("\n") == 2
    assert body.count("| ") == 3
    assert len(body.replace("| ", "").replace("\n", "").split()) == 48


def test_hex_dump_time_padding_on_each_line():
    out = hex_dump(bytes(32), include_time=True)
    lines = out.split("\n")[1:]
    assert len(lines) == 2
    assert all(line.startswith("         ") for line in lines)


def test_hex_dump_uppercase():
    out = hex_dump(b"\xab\xcd")
    assert out.endswith("AB CD ")