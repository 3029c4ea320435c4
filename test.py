"""End-to-end demo: declare checks with annotations and compile a repository.

Run from the repository root with ``src`` on the path.
"""

from __future__ import annotations

import logging
from typing import Annotated

from ruledefs.rule_defs import (
    Cardinality,
    Priority,
    RuleProperty,
    RulesDefinitionContext,
    rule,
)


@rule(
    key="S100",
    name="Function names should comply with a naming convention",
    description="<p>Shared naming conventions improve readability.</p>",
    priority=Priority.MINOR,
)
class FunctionNameCheck:
    format: str = RuleProperty(
        description="Regular expression used to check the function names",
        default_value="^[a-z_][a-z0-9_]*$",
    )
    max_length: Annotated[int, RuleProperty(key="max")] = 40


@rule(key="XPath", cardinality=Cardinality.MULTIPLE, status="BETA")
class XPathCheck:
    xpath_query: str = RuleProperty(type="TEXT")
    message: str = RuleProperty(default_value="The XPath expression matches this piece of code")


class HelperWithoutRule:
    pass


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    context = RulesDefinitionContext()
    repo = context.create_repository("demo", "py").set_name("Demo analyzer")
    repo.load_annotated_classes(FunctionNameCheck, XPathCheck, HelperWithoutRule)
    repo.done()
    print(context.repository("demo").model_dump_json(indent=2))


if __name__ == "__main__":
    main()
