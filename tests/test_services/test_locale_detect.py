"""Tests for locale and timezone currency detection."""
import logging

import pytest

from quickzakat.services.locale_detect import (
    UserEnvironment,
    currency_from_locales,
    currency_from_region,
    currency_from_timezone,
    detect_currency,
    environment_from_os,
    fallback_currency,
    initial_currency,
    normalize_locale_tag,
    region_from_locale,
)


class TestRegionFromLocale:
    """Tests for region_from_locale function."""

    @pytest.mark.parametrize('locale,expected', [
        ('en-GB', 'GB'),
        ('en-us', 'US'),
        ('en_GB.UTF-8', 'GB'),
        ('ur_PK@latin', 'PK'),
        ('zh-Hant-TW', 'TW'),
        ('sr-Latn-RS', 'RS'),
        ('en', 'US'),
        ('ur', 'PK'),
        ('de', 'DE'),
        ('fr', 'FR'),
    ])
    def test_region_found(self, locale, expected):
        assert region_from_locale(locale) == expected

    @pytest.mark.parametrize('locale', [None, '', 'C', 'C.UTF-8', 'POSIX', '*', 'es-419', 'xx', 'english'])
    def test_no_region(self, locale):
        assert region_from_locale(locale) is None

    def test_loose_match_for_odd_tags(self, caplog):
        """Unparseable tags still yield a region from a '-xx' pattern."""
        with caplog.at_level(logging.DEBUG, logger='quickzakat.services.locale_detect'):
            assert region_from_locale('x-private-gb') == 'GB'
        assert 'Could not parse locale tag' in caplog.text

    def test_normalize_locale_tag(self):
        assert normalize_locale_tag(' pt_BR.ISO8859-1 ') == 'pt-BR'


class TestCurrencyFromRegion:
    """Tests for currency_from_region function."""

    @pytest.mark.parametrize('region,expected', [
        ('US', 'USD'),
        ('GB', 'GBP'),
        ('PK', 'PKR'),
        ('DE', 'EUR'),
        ('HR', 'EUR'),
        ('IE', 'EUR'),
        ('JP', None),
        ('CH', None),
        (None, None),
    ])
    def test_mapping(self, region, expected):
        assert currency_from_region(region) == expected


class TestCurrencyFromLocales:
    """Tests for currency_from_locales function."""

    def test_first_mapped_locale_wins(self):
        env = UserEnvironment(locales=('ja-JP', 'fr-CA', 'it-IT', 'en-GB'))
        assert currency_from_locales(env) == 'EUR'

    def test_none_when_no_locale_maps(self):
        env = UserEnvironment(locales=('ja-JP', 'pt-BR'))
        assert currency_from_locales(env) is None


class TestCurrencyFromTimezone:
    """Tests for currency_from_timezone function."""

    @pytest.mark.parametrize('zone,expected', [
        ('Europe/London', 'GBP'),
        ('Asia/Karachi', 'PKR'),
        ('Europe/Paris', 'EUR'),
        ('Europe/Berlin', 'EUR'),
        ('America/New_York', 'USD'),
        ('America/Los_Angeles', 'USD'),
        ('America/Adak', 'USD'),
        ('Pacific/Honolulu', 'USD'),
        ('America/Toronto', None),
        ('Asia/Tokyo', None),
        ('', None),
        (None, None),
    ])
    def test_mapping(self, zone, expected):
        assert currency_from_timezone(UserEnvironment(timezone=zone)) == expected


class TestDetectCurrency:
    """Tests for the detector chain."""

    def test_locale_beats_timezone(self):
        env = UserEnvironment(locales=('en-GB',), timezone='Asia/Karachi')
        assert detect_currency(env) == 'GBP'

    def test_timezone_used_when_locales_silent(self):
        env = UserEnvironment(locales=('ja-JP',), timezone='Asia/Karachi')
        assert detect_currency(env) == 'PKR'

    def test_hard_default(self):
        assert detect_currency(UserEnvironment()) == 'USD'
        assert fallback_currency(UserEnvironment()) == 'USD'

    def test_custom_chain_first_answer_wins(self):
        calls = []

        def first(env):
            calls.append('first')
            return None

        def second(env):
            calls.append('second')
            return 'EUR'

        def third(env):
            calls.append('third')
            return 'GBP'

        assert detect_currency(UserEnvironment(), [first, second, third]) == 'EUR'
        assert calls == ['first', 'second']

    def test_empty_chain_still_answers(self):
        assert detect_currency(UserEnvironment(), []) == 'USD'


class TestInitialCurrency:
    """Tests for initial_currency function."""

    def test_detected_and_offered(self):
        env = UserEnvironment(locales=('ur-PK',))
        assert initial_currency(env, ['USD', 'PKR']) == 'PKR'

    def test_not_offered_falls_back_to_usd(self):
        env = UserEnvironment(locales=('ur-PK',))
        assert initial_currency(env, ['USD', 'EUR']) == 'USD'

    def test_no_restriction(self):
        env = UserEnvironment(locales=('fi-FI',))
        assert initial_currency(env) == 'EUR'


class TestEnvironmentFromOs:
    """Tests for environment_from_os function."""

    def test_reads_locale_variables_in_priority_order(self):
        env = environment_from_os({
            'LANGUAGE': 'ur_PK:en',
            'LC_ALL': '',
            'LANG': 'en_GB.UTF-8',
            'TZ': 'Asia/Karachi',
        })

        assert env.locales == ('ur_PK', 'en', 'en_GB.UTF-8')
        assert env.timezone == 'Asia/Karachi'

    def test_duplicates_removed(self):
        env = environment_from_os({'LC_ALL': 'de_DE.UTF-8', 'LANG': 'de_DE.UTF-8'})
        assert env.locales == ('de_DE.UTF-8',)

    def test_posix_tz_prefix_stripped(self):
        assert environment_from_os({'TZ': ':Europe/London'}).timezone == 'Europe/London'

    def test_default_timezone_when_tz_unset(self):
        env = environment_from_os({}, default_timezone='Europe/Paris')

        assert env.locales == ()
        assert env.timezone == 'Europe/Paris'
