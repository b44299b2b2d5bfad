import logging

from rental_roi.core.taxes import COMMUNITIES, DEFAULT_TAX_RATE, ITP_RATES, tax_rate_for


def test_known_communities():
    assert tax_rate_for("Cataluña") == 0.10
    assert tax_rate_for("Canarias") == 0.065
    assert tax_rate_for("País Vasco") == 0.04


def test_table_covers_all_communities():
    assert len(COMMUNITIES) == 19
    assert COMMUNITIES[0] == "Andalucía"
    assert all(0 < rate < 1 for rate in ITP_RATES.values())


def test_unknown_community_falls_back(caplog):
    with caplog.at_level(logging.WARNING, logger="rental_roi.core.taxes"):
        assert tax_rate_for("Narnia") == DEFAULT_TAX_RATE
    assert "Narnia" in caplog.text


def test_missing_community_falls_back():
    assert tax_rate_for(None) == 0.08
    assert tax_rate_for("") == 0.08
