import json

import pytest

from varcalc.dto import Instruction, InstructionType, Operator, VarValue


def test_operator_values_match_wire_symbols():
    assert Operator("+") is Operator.ADD
    assert Operator("-") is Operator.SUB
    assert Operator("*") is Operator.MUL


def test_instruction_type_values():
    assert InstructionType("calc") is InstructionType.CALCULATE
    assert InstructionType("print") is InstructionType.PRINT


def test_unknown_operator_rejected():
    with pytest.raises(ValueError):
        Operator("/")


def test_from_dict_maps_json_keys():
    data = {"type": "calc", "var": "x", "op": "+", "left": 5, "right": "y"}
    instruction = Instruction.from_dict(data)
    assert instruction == Instruction(
        type="calc", variable="x", operator="+", left=5, right="y"
    )


def test_from_dict_missing_keys_take_defaults():
    instruction = Instruction.from_dict({"type": "print", "var": "z"})
    assert instruction.operator == ""
    assert instruction.left is None
    assert instruction.right is None
    assert instruction.variable == "z"


def test_from_dict_null_string_field_becomes_empty():
    instruction = Instruction.from_dict({"type": "calc", "var": None})
    assert instruction.variable == ""


def test_from_dict_rejects_non_object():
    with pytest.raises(TypeError):
        Instruction.from_dict(["calc", "x"])


def test_from_dict_rejects_non_string_type():
    with pytest.raises(TypeError, match="'type'"):
        Instruction.from_dict({"type": 5, "var": "x"})


def test_from_dict_rejects_non_string_variable():
    with pytest.raises(TypeError, match="'var'"):
        Instruction.from_dict({"type": "calc", "var": ["x"]})


def test_from_dict_keeps_float_operand_as_sent():
    instruction = Instruction.from_dict({"type": "calc", "var": "x", "op": "*", "left": 2.5, "right": 3})
    assert instruction.left == 2.5
    assert instruction.right == 3


def test_var_value_to_dict():
    assert VarValue(var="x", value=5).to_dict() == {"var": "x", "value": 5}


def test_var_value_json_round_trip():
    item = VarValue(var="total", value=-42)
    restored = VarValue(**json.loads(json.dumps(item.to_dict())))
    assert restored == item