from pctenc import encode, decode, DecodeError, InvalidCharacter


SAMPLES = [
    "this that",
    "👾 Exterminate!",
    "already-safe_text.~",
]

BROKEN = [
    "👾 Exterminate!",
    "this%2that",
    "this%20that%",
    "%C3",
]


if __name__ == '__main__':
    for sample in SAMPLES:
        encoded = encode(sample)
        print(f"{sample!r} -> {encoded!r} -> {decode(encoded)!r}")

    for broken in BROKEN:
        try:
            decode(broken)
        except InvalidCharacter as exc:
            print(f"{broken!r}: {exc.character!r} is not allowed at {exc.index}")
        except DecodeError as exc:
            print(f"{broken!r}: {exc}")
