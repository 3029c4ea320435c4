import unittest

from ruledefs.errors import ParamTypeError, SchemaError
from ruledefs.ir.param_type import RuleParamType


class TestRuleParamType(unittest.TestCase):
    def test_parse_plain_types(self) -> None:
        self.assertEqual(RuleParamType.parse("INTEGER"), RuleParamType.INTEGER)
        self.assertEqual(RuleParamType.parse("  FLOAT "), RuleParamType.FLOAT)
        self.assertEqual(RuleParamType.parse("TEXT"), RuleParamType.TEXT)
        self.assertEqual(RuleParamType.parse("BOOLEAN"), RuleParamType.BOOLEAN)
        self.assertEqual(RuleParamType.parse("STRING"), RuleParamType.STRING)

    def test_parse_legacy_forms(self) -> None:
        self.assertEqual(RuleParamType.parse("i"), RuleParamType.INTEGER)
        self.assertEqual(RuleParamType.parse("i{}"), RuleParamType.INTEGER)
        self.assertEqual(RuleParamType.parse("s"), RuleParamType.STRING)
        self.assertEqual(RuleParamType.parse("r"), RuleParamType.STRING)
        self.assertEqual(RuleParamType.parse("REGULAR_EXPRESSION"), RuleParamType.STRING)
        self.assertEqual(RuleParamType.parse("b"), RuleParamType.BOOLEAN)
        legacy_list = RuleParamType.parse("s[public,protected]")
        self.assertEqual(legacy_list, RuleParamType.multiple_list_of_values("public", "protected"))

    def test_parse_list_with_options(self) -> None:
        parsed = RuleParamType.parse('SINGLE_SELECT_LIST,multiple=true,values="alpha,beta, gamma"')
        self.assertTrue(parsed.is_list)
        self.assertTrue(parsed.multiple)
        self.assertEqual(parsed.values, ("alpha", "beta", "gamma"))

        single = RuleParamType.parse("SINGLE_SELECT_LIST,values=one")
        self.assertFalse(single.multiple)
        self.assertEqual(single.values, ("one",))

    def test_str_is_canonical(self) -> None:
        self.assertEqual(str(RuleParamType.INTEGER), "INTEGER")
        list_type = RuleParamType.multiple_list_of_values("a", "b")
        self.assertEqual(str(list_type), 'SINGLE_SELECT_LIST,multiple=true,values="a,b"')
        self.assertEqual(RuleParamType.parse(str(list_type)), list_type)
        single = RuleParamType.single_list_of_values("x")
        self.assertEqual(RuleParamType.parse(str(single)), single)

    def test_unknown_type_rejected(self) -> None:
        with self.assertRaisesRegex(ParamTypeError, "not-a-type"):
            RuleParamType.parse("not-a-type")
        with self.assertRaises(ValueError):
            RuleParamType.parse("integer")
        with self.assertRaises(SchemaError):
            RuleParamType.parse("")

    def test_malformed_options_rejected(self) -> None:
        with self.assertRaisesRegex(ParamTypeError, "expected name=value"):
            RuleParamType.parse("SINGLE_SELECT_LIST,values")
        with self.assertRaisesRegex(ParamTypeError, "Unknown option"):
            RuleParamType.parse('SINGLE_SELECT_LIST,colors="a"')
        with self.assertRaisesRegex(ParamTypeError, "true or false"):
            RuleParamType.parse('SINGLE_SELECT_LIST,multiple=yes,values="a"')
        with self.assertRaisesRegex(ParamTypeError, "at least one value"):
            RuleParamType.parse("SINGLE_SELECT_LIST")
        with self.assertRaisesRegex(ParamTypeError, "does not accept"):
            RuleParamType.parse('INTEGER,values="1,2"')

    def test_list_values_validated(self) -> None:
        with self.assertRaises(ParamTypeError):
            RuleParamType.single_list_of_values("a,b")
        with self.assertRaises(ParamTypeError):
            RuleParamType.multiple_list_of_values()


if __name__ == "__main__":
    unittest.main()
