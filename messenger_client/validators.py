"""validators.py

Field validation for the registration and login forms.

Rules are static per form; every function here is pure so pages can call them
on every keystroke, on blur, and again on submit.
"""
import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

ValidationResult = List[str]

# Same character set the backend accepts for logins.
USERNAME_RE = re.compile(r"^[a-zA-Z0-9_-]+$")


@dataclass(frozen=True)
class FieldRule:
    name: str
    label: str
    required: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[Union[str, re.Pattern]] = None
    pattern_message: Optional[str] = None
    # name of the sibling field this one must equal (confirmation fields)
    matches: Optional[str] = None
    mismatch_message: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.pattern, str):
            object.__setattr__(self, "pattern", re.compile(self.pattern))


@dataclass(frozen=True)
class FormRuleSet:
    """Ordered collection of `FieldRule`s for one form."""

    name: str
    rules: Tuple[FieldRule, ...]

    def __iter__(self) -> Iterator[FieldRule]:
        return iter(self.rules)

    def __getitem__(self, field_name: str) -> FieldRule:
        for rule in self.rules:
            if rule.name == field_name:
                return rule
        raise KeyError(field_name)

    def __contains__(self, field_name: object) -> bool:
        return any(rule.name == field_name for rule in self.rules)

    @property
    def field_names(self) -> List[str]:
        return [rule.name for rule in self.rules]

    def dependents(self, field_name: str) -> List[str]:
        """Fields whose equality check reads `field_name`."""
        return [rule.name for rule in self.rules if rule.matches == field_name]


def validate_field(value: Optional[str], rule: FieldRule, sibling_value: Optional[str] = None) -> ValidationResult:
    """Return the list of error messages for a single field value.

    A required field left empty yields only the "is required" message. An
    optional field left empty yields nothing. Otherwise the length, pattern and
    equality checks each append their own message.
    """
    text = (value or "").strip()
    errors: ValidationResult = []

    if not text:
        if rule.required:
            errors.append(f"{rule.label} is required")
        return errors

    if rule.min_length is not None and len(text) < rule.min_length:
        errors.append(f"{rule.label} must be at least {rule.min_length} characters")
    elif rule.max_length is not None and len(text) > rule.max_length:
        errors.append(f"{rule.label} must be no more than {rule.max_length} characters")

    # unanchored: rules that must match the whole value use ^...$
    if rule.pattern is not None and rule.pattern.search(text) is None:
        errors.append(rule.pattern_message or f"{rule.label} has an invalid format")

    # raw comparison: the value is sent as typed, so whitespace counts
    if sibling_value and (value or "") != sibling_value:
        errors.append(rule.mismatch_message or f"{rule.label} does not match")

    return errors


def validate_form(values: Mapping[str, Optional[str]], rule_set: FormRuleSet) -> Dict[str, ValidationResult]:
    results: Dict[str, ValidationResult] = {}
    for rule in rule_set:
        sibling = values.get(rule.matches) if rule.matches else None
        results[rule.name] = validate_field(values.get(rule.name), rule, sibling)
    return results


def revalidate(values: Mapping[str, Optional[str]], rule_set: FormRuleSet, changed: str) -> Dict[str, ValidationResult]:
    """Validate `changed` plus any confirmation field that compares against it.

    Dependents are only re-checked once they hold a value, so typing a password
    does not flag an untouched confirmation box as missing.
    """
    full = validate_form(values, rule_set)
    results = {changed: full[changed]}
    for name in rule_set.dependents(changed):
        if (values.get(name) or "").strip():
            results[name] = full[name]
    return results


def form_is_valid(results: Mapping[str, ValidationResult]) -> bool:
    return not any(results.values())


def password_strength(password: Optional[str]) -> str:
    """Rate a password as "", "weak", "medium" or "strong".

    Advisory only; it never turns into a validation error. One point each for
    length >= 8, mixed case, a digit and a symbol.
    """
    if not password:
        return ""
    score = 0
    if len(password) >= 8:
        score += 1
    if re.search(r"[a-z]", password) and re.search(r"[A-Z]", password):
        score += 1
    if re.search(r"\d", password):
        score += 1
    if re.search(r"[^a-zA-Z0-9]", password):
        score += 1
    if score <= 1:
        return "weak"
    if score <= 2:
        return "medium"
    return "strong"


REGISTRATION_RULES = FormRuleSet(
    name="registration",
    rules=(
        FieldRule(
            name="login",
            label="Username",
            required=True,
            min_length=3,
            max_length=50,
            pattern=USERNAME_RE,
            pattern_message="Username can only contain letters, numbers, hyphens, and underscores",
        ),
        FieldRule(name="password", label="Password", required=True, min_length=6, max_length=100),
        FieldRule(
            name="confirmPassword",
            label="Password confirmation",
            required=True,
            matches="password",
            mismatch_message="Passwords do not match",
        ),
    ),
)

LOGIN_RULES = FormRuleSet(
    name="login",
    rules=(
        FieldRule(name="login", label="Username", required=True),
        FieldRule(name="password", label="Password", required=True),
    ),
)
