import pytest

from messenger_client.validators import (
    LOGIN_RULES,
    REGISTRATION_RULES,
    FieldRule,
    form_is_valid,
    password_strength,
    revalidate,
    validate_field,
    validate_form,
)


USERNAME = REGISTRATION_RULES['login']
PASSWORD = REGISTRATION_RULES['password']
CONFIRM = REGISTRATION_RULES['confirmPassword']


@pytest.mark.parametrize('rule, value', [
    (USERNAME, 'bob_the-builder1'),
    (PASSWORD, 'secret'),
    (CONFIRM, 'anything'),
    (LOGIN_RULES['login'], 'x'),
    (LOGIN_RULES['password'], 'y'),
])
def test_value_satisfying_every_constraint_has_no_errors(rule, value):
    assert validate_field(value, rule) == []


@pytest.mark.parametrize('rule', list(REGISTRATION_RULES) + list(LOGIN_RULES))
def test_whitespace_in_required_field_yields_only_required_message(rule):
    assert validate_field('   \t', rule) == [f'{rule.label} is required']


def test_none_value_treated_as_empty():
    assert validate_field(None, USERNAME) == ['Username is required']


def test_short_username():
    rule = FieldRule(name='login', label='Username', min_length=3)
    assert validate_field('ab', rule) == ['Username must be at least 3 characters']


def test_min_length_boundary_is_inclusive():
    rule = FieldRule(name='password', label='Password', min_length=6)
    assert validate_field('secret', rule) == []


def test_max_length():
    assert validate_field('a' * 51, USERNAME) == ['Username must be no more than 50 characters']
    assert validate_field('a' * 50, USERNAME) == []


def test_value_is_trimmed_before_length_checks():
    assert validate_field('  ab  ', USERNAME) == ['Username must be at least 3 characters']


def test_length_and_pattern_errors_accumulate():
    assert validate_field('a!', USERNAME) == [
        'Username must be at least 3 characters',
        'Username can only contain letters, numbers, hyphens, and underscores',
    ]


def test_pattern_default_message():
    rule = FieldRule(name='code', label='Code', pattern=r'^\d+$')
    assert validate_field('12a', rule) == ['Code has an invalid format']
    assert validate_field('123', rule) == []


def test_unanchored_pattern_matches_anywhere():
    rule = FieldRule(name='password', label='Password', pattern=r'[0-9]', pattern_message='needs a digit')
    assert validate_field('abc1', rule) == []
    assert validate_field('abcd', rule) == ['needs a digit']


def test_anchored_username_pattern_still_checks_whole_value():
    assert validate_field('bob smith', USERNAME) == [
        'Username can only contain letters, numbers, hyphens, and underscores',
    ]


def test_optional_empty_field_has_no_errors():
    rule = FieldRule(name='nick', label='Nickname', min_length=3, pattern=r'[a-z]+')
    assert validate_field('', rule) == []
    assert validate_field('  ', rule) == []


def test_confirmation_matches():
    assert validate_field('hunter22', CONFIRM, 'hunter22') == []


def test_confirmation_mismatch():
    assert validate_field('hunter22', CONFIRM, 'hunter23') == ['Passwords do not match']


def test_confirmation_whitespace_difference_is_a_mismatch():
    assert validate_field('secret', CONFIRM, 'secret ') == ['Passwords do not match']
    assert validate_field(' secret', CONFIRM, 'secret') == ['Passwords do not match']


def test_form_rejects_confirmation_differing_only_by_whitespace():
    values = {'login': 'bob', 'password': 'secret1 ', 'confirmPassword': 'secret1'}
    results = validate_form(values, REGISTRATION_RULES)
    assert results['confirmPassword'] == ['Passwords do not match']


def test_confirmation_ignored_when_sibling_empty():
    assert validate_field('hunter22', CONFIRM, '') == []
    assert validate_field('hunter22', CONFIRM, None) == []


def test_generic_mismatch_message():
    rule = FieldRule(name='email2', label='Email confirmation', matches='email')
    assert validate_field('a@b.c', rule, 'x@y.z') == ['Email confirmation does not match']


def test_validate_form_uses_current_sibling_value():
    values = {'login': 'bob', 'password': 'secret1', 'confirmPassword': 'secret1'}
    results = validate_form(values, REGISTRATION_RULES)
    assert results == {'login': [], 'password': [], 'confirmPassword': []}
    assert form_is_valid(results)

    values['password'] = 'secret2'
    results = validate_form(values, REGISTRATION_RULES)
    assert results['confirmPassword'] == ['Passwords do not match']
    assert not form_is_valid(results)


def test_validate_form_missing_values_count_as_empty():
    results = validate_form({}, LOGIN_RULES)
    assert results == {'login': ['Username is required'], 'password': ['Password is required']}


def test_revalidate_includes_filled_dependent():
    values = {'login': '', 'password': 'secret1', 'confirmPassword': 'other12'}
    results = revalidate(values, REGISTRATION_RULES, 'password')
    assert results == {'password': [], 'confirmPassword': ['Passwords do not match']}


def test_revalidate_skips_untouched_dependent():
    values = {'login': '', 'password': 'secret1', 'confirmPassword': ''}
    assert revalidate(values, REGISTRATION_RULES, 'password') == {'password': []}


def test_rule_set_lookup():
    assert REGISTRATION_RULES.field_names == ['login', 'password', 'confirmPassword']
    assert REGISTRATION_RULES.dependents('password') == ['confirmPassword']
    assert 'login' in LOGIN_RULES
    with pytest.raises(KeyError):
        LOGIN_RULES['confirmPassword']


@pytest.mark.parametrize('password, expected', [
    ('', ''),
    (None, ''),
    ('abcdef', 'weak'),
    ('abcdefgh', 'weak'),
    ('abcdefg1', 'medium'),
    ('Abcdefg1', 'strong'),
    ('Abcdef1!', 'strong'),
])
def test_password_strength(password, expected):
    assert password_strength(password) == expected
