"""Script helpers used by the circuit verifier: stack access, number pushes and clean-up."""

from tx_engine import Script, encode_num
from tx_engine.engine.op_codes import (
    OP_0,
    OP_1,
    OP_1NEGATE,
    OP_2,
    OP_2DROP,
    OP_2DUP,
    OP_2OVER,
    OP_3,
    OP_4,
    OP_5,
    OP_6,
    OP_7,
    OP_8,
    OP_9,
    OP_10,
    OP_11,
    OP_12,
    OP_13,
    OP_14,
    OP_15,
    OP_16,
    OP_DROP,
    OP_DUP,
    OP_OVER,
    OP_PICK,
)

patterns_to_pick = {
    (0, 1): [OP_DUP],
    (1, 1): [OP_OVER],
    (1, 2): [OP_2DUP],
    (3, 2): [OP_2OVER],
    (3, 4): [OP_2OVER, OP_2OVER],
}
op_range = range(-1, 17)
op_range_to_opcode = {
    -1: OP_1NEGATE,
    0: OP_0,
    1: OP_1,
    2: OP_2,
    3: OP_3,
    4: OP_4,
    5: OP_5,
    6: OP_6,
    7: OP_7,
    8: OP_8,
    9: OP_9,
    10: OP_10,
    11: OP_11,
    12: OP_12,
    13: OP_13,
    14: OP_14,
    15: OP_15,
    16: OP_16,
}


def pick(position: int, n_elements: int) -> Script:
    """Copy the elements x_{position}, ..., x_{position-n_elements+1} to the top of the stack.

    Args:
        position (int): The stack position of the leftmost element to pick, counting from 0 at the top.
        n_elements (int): The number of elements to pick.

    Returns:
        Script picking the elements, using the short opcodes of `patterns_to_pick` where one exists.

    Example:
        >>> pick(2, 2)
        OP_2 OP_PICK OP_2 OP_PICK
        >>> pick(1, 2)
        OP_2DUP
        >>> pick(20, 1)
        0x14 OP_PICK
    """
    if position < n_elements - 1:
        msg = "Position must be at least equal to n_elements - 1: "
        msg += f"position: {position}, n_elements: {n_elements}"
        raise ValueError(msg)

    if (position, n_elements) in patterns_to_pick:
        return Script(patterns_to_pick[(position, n_elements)])
    if position in op_range[1:]:
        return Script([op_range_to_opcode[position], OP_PICK] * n_elements)

    out = Script()
    num_encoded = encode_num(position)
    for _ in range(n_elements):
        out.append_pushdata(num_encoded)
        out += Script([OP_PICK])

    return out


def nums_to_script(nums: list[int]) -> Script:
    """Push a list of numbers to the stack.

    Args:
        nums (list[int]): List of numbers to push to the stack.

    Returns:
        Script containing the numbers to push.

    Example:
        >>> nums_to_script([-2, -1, 0, 1, 2, 16, 17, 64, 128])
        0x82 OP_1NEGATE OP_0 OP_1 OP_2 OP_16 0x11 0x40 0x8000
    """
    out = Script()
    for n in nums:
        if n in op_range:
            out += Script([op_range_to_opcode[n]])
        else:
            out.append_pushdata(encode_num(n))

    return out


def drop(n_elements: int) -> Script:
    """Drop the top `n_elements` elements of the stack.

    Example:
        >>> drop(5)
        OP_2DROP OP_2DROP OP_DROP
    """
    if n_elements < 0:
        msg = "The number of elements to drop must be non-negative: "
        msg += f"n_elements: {n_elements}"
        raise ValueError(msg)

    if n_elements == 0:
        return Script()

    return Script([OP_2DROP] * (n_elements // 2) + [OP_DROP] * (n_elements % 2))
