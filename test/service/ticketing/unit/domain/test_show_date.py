from datetime import date

import pytest

from src.service.ticketing.domain.value_object.show_date import ShowDate


@pytest.mark.unit
class TestShowDate:
    def test_parse_day_month_year(self):
        show_date = ShowDate.parse('15,8,2024')

        assert show_date == ShowDate(year=2024, month=8, day=15)
        assert str(show_date) == '15,8,2024'

    @pytest.mark.parametrize('raw', ['15-8-2024', '15,8', 'a,b,c', ''])
    def test_parse_rejects_malformed(self, raw: str):
        with pytest.raises(ValueError):
            ShowDate.parse(raw)

    def test_display(self):
        assert ShowDate(year=2024, month=8, day=5).display() == '05 August, 2024'

    def test_is_on_or_after_includes_same_day(self):
        show_date = ShowDate(year=2024, month=8, day=15)

        assert show_date.is_on_or_after(date(2024, 8, 15))
        assert show_date.is_on_or_after(date(2024, 7, 31))
        assert not show_date.is_on_or_after(date(2024, 8, 16))

    def test_ordering_is_chronological(self):
        assert ShowDate.parse('31,12,2023') < ShowDate.parse('1,1,2024')
