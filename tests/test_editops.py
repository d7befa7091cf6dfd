from hypothesis import given
from hypothesis import strategies as st

from fuzzmatch.editops import (
    EditOp,
    Editops,
    EditType,
    Opcode,
    Opcodes,
    editops_apply,
    editops_apply_str,
    opcodes_apply,
    opcodes_apply_str,
)


def _kitten_ops():
    return Editops(
        [
            EditOp(EditType.REPLACE, 0, 0),
            EditOp(EditType.REPLACE, 4, 4),
            EditOp(EditType.INSERT, 6, 6),
        ],
        6,
        7,
    )


def test_editops_apply_str_kitten_sitting():
    assert editops_apply_str(_kitten_ops(), "kitten", "sitting") == "sitting"


def test_editops_apply_returns_list():
    assert editops_apply(_kitten_ops(), "kitten", "sitting") == list("sitting")


def test_editops_apply_delete():
    ops = Editops([EditOp(EditType.DELETE, 1, 1)], 3, 2)
    assert editops_apply_str(ops, "abc", "ac") == "ac"


def test_editops_apply_bytes_gives_ints_and_str():
    ops = Editops([EditOp(EditType.DELETE, 1, 1)], 3, 2)
    assert editops_apply(ops, b"abc", b"ac") == list(b"ac")
    assert editops_apply_str(ops, b"abc", b"ac") == "ac"


def test_editops_empty_returns_source():
    assert editops_apply_str(Editops(), "same", "other") == "same"


def test_editops_container_behaviour():
    ops = _kitten_ops()
    assert len(ops) == 3
    assert ops[1] == EditOp(EditType.REPLACE, 4, 4)
    assert [op.type for op in ops] == [EditType.REPLACE, EditType.REPLACE, EditType.INSERT]
    ops.append(EditOp(EditType.DELETE, 5, 7))
    assert len(ops) == 4
    assert ops[:2] == Editops(_kitten_ops().ops[:2], 6, 7)
    assert ops.src_len == 6 and ops.dest_len == 7


def test_opcodes_apply_mixed():
    ops = Opcodes(
        [
            Opcode(EditType.REPLACE, 0, 1, 0, 1),
            Opcode(EditType.NONE, 1, 4, 1, 4),
            Opcode(EditType.REPLACE, 4, 5, 4, 5),
            Opcode(EditType.NONE, 5, 6, 5, 6),
            Opcode(EditType.INSERT, 6, 6, 6, 7),
        ],
        6,
        7,
    )
    assert len(ops) == 5
    assert opcodes_apply_str(ops, "kitten", "sitting") == "sitting"
    assert opcodes_apply(ops, "kitten", "sitting") == list("sitting")


def test_opcodes_apply_delete_block():
    ops = Opcodes(
        [Opcode(EditType.NONE, 0, 1, 0, 1), Opcode(EditType.DELETE, 1, 3, 1, 1)],
        3,
        1,
    )
    assert opcodes_apply_str(ops, "abc", "a") == "a"
    assert list(ops)[1].type is EditType.DELETE


@given(st.text(alphabet="abcd"), st.text(alphabet="abcd"))
def test_delete_all_then_insert_all_yields_destination(s1, s2):
    ops = Editops(
        [EditOp(EditType.DELETE, i, 0) for i in range(len(s1))]
        + [EditOp(EditType.INSERT, len(s1), j) for j in range(len(s2))],
        len(s1),
        len(s2),
    )
    assert editops_apply_str(ops, s1, s2) == s2


@given(st.text(alphabet="abc", min_size=0, max_size=20).flatmap(
    lambda s: st.tuples(st.just(s), st.text(alphabet="abc", min_size=len(s), max_size=len(s)))
))
def test_replacements_yield_destination(pair):
    s1, s2 = pair
    ops = Editops(
        [EditOp(EditType.REPLACE, i, i) for i, (a, b) in enumerate(zip(s1, s2)) if a != b],
        len(s1),
        len(s2),
    )
    assert editops_apply_str(ops, s1, s2) == s2


@given(st.text(alphabet="xyz"), st.text(alphabet="xyz"))
def test_opcodes_delete_insert_yields_destination(s1, s2):
    ops = Opcodes(
        [
            Opcode(EditType.DELETE, 0, len(s1), 0, 0),
            Opcode(EditType.INSERT, len(s1), len(s1), 0, len(s2)),
        ],
        len(s1),
        len(s2),
    )
    assert opcodes_apply_str(ops, s1, s2) == s2