"""Batch validation and the loaded data/conditions session."""
from .errors import NotReadyError
from .models import ParameterResult, ValidationSummary
from .utils.loader import DEFAULT_MARKER, load_conditions, load_json
from .utils.search import find_properties, flatten_properties, match_parameter


def validate_all(parameter_names, data):
    """Check every parameter name against data, keeping the input order.

    The data is flattened once and the property list is shared by all checks.
    """
    if not parameter_names:
        return []
    return validate_properties(parameter_names, flatten_properties(data))


def validate_properties(parameter_names, all_properties):
    """Like validate_all, for a property list that is already flattened."""
    results = []
    for name in parameter_names:
        result = match_parameter(name, all_properties)
        results.append(ParameterResult(
            parameter=name,
            found=result.exact_match,
            similar_matches=result.similar_matches,
        ))
    return results


def summarize(results):
    return ValidationSummary.from_results(results)


class ParameterValidator:
    """Holds the loaded data document and parameter names between commands."""

    def __init__(self, data_path=None, conditions_path=None, marker=DEFAULT_MARKER):
        self.marker = marker
        self.data = None
        self.data_path = None
        self.conditions = []
        self.conditions_path = None
        self._properties = None

        if data_path:
            self.load_data(data_path)
        if conditions_path:
            self.load_conditions(conditions_path)

    def load_data(self, path):
        self.data_path = path
        self.data = load_json(path)
        self._properties = None
        return self.data is not None

    def load_conditions(self, path):
        self.conditions_path = path
        self.conditions = load_conditions(path, self.marker)
        return bool(self.conditions)

    @property
    def properties(self):
        """Flattened property paths of the loaded data, computed once per load."""
        if self._properties is None:
            self._properties = flatten_properties(self.data) if self.data is not None else []
        return self._properties

    def is_ready(self):
        return self.data is not None and bool(self.conditions)

    def check(self, parameter_name):
        return match_parameter(parameter_name, self.properties)

    def validate(self):
        if self.data is None:
            raise NotReadyError("No data loaded. Use load-data <file> first.")
        if not self.conditions:
            raise NotReadyError("No parameters loaded. Use load-conditions <file> first.")
        return validate_properties(self.conditions, self.properties)

    def find(self, keyword):
        return find_properties(keyword, self.properties)
