import json
import unittest

from ruledefs.check.annotations import Priority, RuleProperty, rule
from ruledefs.definitions import RulesDefinitionContext
from ruledefs.errors import RepositoryError
from ruledefs.ir.param_type import RuleParamType
from ruledefs.ir.records import ParamRecord, RuleRecord
from ruledefs.ir.types import RuleStatus, Severity


@rule(key="S200", name="Line length", priority=Priority.CRITICAL)
class LineLengthCheck:
    maximum: int = RuleProperty(default_value="120")


class TestRulesDefinitionContext(unittest.TestCase):
    def test_builder_defaults_and_fluent_setters(self) -> None:
        context = RulesDefinitionContext()
        repo = context.create_repository("squid", "java").set_name("Squid")
        new_rule = repo.new_rule("R1")
        self.assertIs(new_rule.set_name("Rule one"), new_rule)
        new_rule.new_param("p").set_description("A parameter").set_default_value("1")

        record = repo.done()
        self.assertEqual(record.name, "Squid")
        rule_record = record.rule("R1")
        self.assertEqual(rule_record.default_severity, Severity.MAJOR)
        self.assertEqual(rule_record.status, RuleStatus.READY)
        self.assertFalse(rule_record.template)
        self.assertEqual(rule_record.param("p").type, RuleParamType.STRING)
        self.assertIs(context.repository("squid"), record)
        self.assertEqual(context.repositories(), [record])
        self.assertIsNone(context.repository("missing"))

    def test_duplicates_rejected(self) -> None:
        context = RulesDefinitionContext()
        repo = context.create_repository("squid", "java")
        new_rule = repo.new_rule("R1")
        with self.assertRaisesRegex(RepositoryError, "'R1' of repository 'squid'"):
            repo.new_rule("R1")
        new_rule.new_param("p")
        with self.assertRaisesRegex(RepositoryError, "parameter 'p'"):
            new_rule.new_param("p")
        repo.done()
        with self.assertRaisesRegex(RepositoryError, "defined several times"):
            context.create_repository("squid", "java").done()

    def test_invalid_builder_input(self) -> None:
        repo = RulesDefinitionContext().create_repository("squid", "java")
        with self.assertRaises(RepositoryError):
            repo.new_rule("")
        new_rule = repo.new_rule("R1")
        with self.assertRaises(RepositoryError):
            new_rule.set_status("READY")  # type: ignore[arg-type]
        with self.assertRaises(RepositoryError):
            new_rule.new_param("p").set_type("INTEGER")  # type: ignore[arg-type]
        with self.assertRaises(RepositoryError):
            RulesDefinitionContext().create_repository("", "java")

    def test_load_annotated_classes(self) -> None:
        repo = RulesDefinitionContext().create_repository("squid", "java")
        self.assertIs(repo.load_annotated_classes(LineLengthCheck), repo)
        new_rule = repo.rule("S200")
        self.assertIsNotNone(new_rule)
        self.assertEqual([p.key for p in new_rule.params()], ["maximum"])
        self.assertEqual(repo.build().rule("S200").default_severity, "CRITICAL")

    def test_export_renders_param_types_as_text(self) -> None:
        repo = RulesDefinitionContext().create_repository("squid", "java")
        repo.new_rule("R1").new_param("mode").set_type(RuleParamType.multiple_list_of_values("a", "b"))
        payload = json.loads(repo.build().model_dump_json())
        param = payload["rules"][0]["params"][0]
        self.assertEqual(param["type"], 'SINGLE_SELECT_LIST,multiple=true,values="a,b"')
        self.assertEqual(payload["rules"][0]["status"], "READY")

    def test_records_validate_and_parse_types(self) -> None:
        param = ParamRecord(key="n", type="INTEGER")
        self.assertEqual(param.type, RuleParamType.INTEGER)
        with self.assertRaises(ValueError):
            RuleRecord(key="", default_severity="MAJOR")


if __name__ == "__main__":
    unittest.main()
