import pytest

KEYWORDS = [
    (b"as", 1), (b"break", 2), (b"const", 3), (b"continue", 4), (b"crate", 5),
    (b"else", 6), (b"enum", 7), (b"extern", 8), (b"false", 9), (b"fn", 10),
    (b"for", 11), (b"if", 12), (b"impl", 13), (b"in", 14), (b"let", 15),
    (b"loop", 16), (b"match", 17), (b"mod", 18), (b"move", 19), (b"mut", 20),
    (b"pub", 21), (b"ref", 22), (b"return", 23), (b"self", 24), (b"Self", 25),
    (b"static", 26), (b"struct", 27), (b"super", 28), (b"trait", 29), (b"true", 30),
    (b"type", 31), (b"unsafe", 32), (b"use", 33), (b"where", 34), (b"while", 35),
    (b"dyn", 36), (b"await", 37), (b"async", 38),
    (b"abstract", 39), (b"become", 40), (b"box", 41), (b"do", 42), (b"final", 43),
    (b"macro", 44), (b"override", 45), (b"priv", 46), (b"typeof", 47),
    (b"unsized", 48), (b"virtual", 49), (b"yield", 50),
    (b"try", 51),
]


@pytest.fixture
def keywords():
    return list(KEYWORDS)


@pytest.fixture
def keyword_keys():
    return [k for k, _ in KEYWORDS]
