from __future__ import annotations

import yaml
from pathlib import Path
from typing import Any, Dict

# Project root (parent of this file)
BASE_DIR = Path(__file__).resolve().parent
# Shipped as package data so installed copies find it next to this module
CONFIG_PATH = BASE_DIR / "rental_roi" / "config.yaml"


def _load_yaml() -> Dict[str, Any]:
    with open(CONFIG_PATH, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            return {}
        return data


CFG = _load_yaml()

# Location
ADDRESS: str = str(CFG["address"])
COMMUNITY: str = str(CFG["community"])

# Purchase
PURCHASE_PRICE: float = float(CFG["purchase_price"])
CLOSING_COSTS: float = float(CFG["closing_costs"])
MORTGAGE_SETUP_COSTS: float = float(CFG["mortgage_setup_costs"])
RENOVATION_COST: float = float(CFG["renovation_cost"])
AGENT_COMMISSION: float = float(CFG["agent_commission"])
FURNITURE_COST: float = float(CFG["furniture_cost"])

# Income
MONTHLY_RENT: float = float(CFG["monthly_rent"])
ANNUAL_APPRECIATION_RATE: float = float(CFG["annual_appreciation_rate"]) / 100.0

# Financing
FINANCED_PCT: float = float(CFG["financed_pct"]) / 100.0
LOAN_TERM_YEARS: int = int(CFG["loan_term_years"])
ANNUAL_INTEREST_RATE: float = float(CFG["annual_interest_rate"]) / 100.0

# Annual expenses
ANNUAL_PROPERTY_TAX: float = float(CFG["annual_property_tax"])
ANNUAL_INSURANCE: float = float(CFG["annual_insurance"])
ANNUAL_COMMUNITY_FEES: float = float(CFG["annual_community_fees"])
ANNUAL_MAINTENANCE: float = float(CFG["annual_maintenance"])
ANNUAL_VACANCY_LOSS: float = float(CFG["annual_vacancy_loss"])

# Projection & app
PROJECTION_YEARS: int = int(CFG["projection_years"])
LOG_LEVEL: str = str(CFG.get("log_level", "INFO")).upper()
