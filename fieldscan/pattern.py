from typing import Dict, List, Optional

from fieldscan.engine import match_specs
from fieldscan.errors import DoesNotMatch
from fieldscan.spec import Spec
from fieldscan.template import parse_template


class Pattern:
    def __init__(self, template: str):
        self.template = template
        self.specs = parse_template(template)   # type: List[Spec]

    @property
    def fields(self) -> List[str]:
        """Named fields in template order, without duplicates."""
        names = []
        for spec in self.specs:
            if not spec.is_anonymous and spec.field_name.identifier not in names:
                names.append(spec.field_name.identifier)
        return names

    def match_all(self, target: str, max_steps: Optional[int] = None) -> Dict[str, str]:
        return match_specs(self.specs, target.encode('utf8'), max_steps=max_steps)

    def match(self, target: str) -> Optional[Dict[str, str]]:
        try:
            return self.match_all(target)
        except DoesNotMatch:
            return None

    def __str__(self):
        return self.template

    def __repr__(self):
        return '<Pattern %s>' % (self.template,)

    def __eq__(self, other):
        if not isinstance(other, Pattern):
            return NotImplemented
        return self.template == other.template

    def __hash__(self):
        return hash(self.template)
