def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def generate_membership_number(user_id: str, prefix: str = "BP") -> str:
    """
    Derive a stable membership number from a user id.

    Folds the UTF-16 code units of ``user_id`` into a 32-bit signed
    polynomial hash (``h = h * 31 + c``) and maps it onto 10000-99999.
    The same id always yields the same number. Distinct ids can collide.
    """
    data = user_id.encode("utf-16-le")
    h = 0
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        h = _to_int32(h * 31 + code_unit)
    return f"{prefix}{abs(h) % 90000 + 10000}"
