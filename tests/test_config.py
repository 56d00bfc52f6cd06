"""Tests for csvstats.config."""

from csvstats.config import CONFIG, get


class TestGet:

    def test_section_key(self):
        assert get('input.delimiter') == ','
        assert get('labels.maximum') == 'Max'

    def test_missing_key_default(self):
        assert get('labels.median') is None
        assert get('labels.median', 'Median') == 'Median'

    def test_missing_section_default(self):
        assert get('output.format', 'text') == 'text'

    def test_report_order_has_a_label_for_every_entry(self):
        assert set(CONFIG['report']['order']) == set(CONFIG['labels'])
