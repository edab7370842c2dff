from __future__ import annotations

from pathlib import Path

import pytest

from homebank_helper.data_model import HomeBankDb
from homebank_helper.data_model.xhb_parsers import build_database

# Julian offsets used below:
#   738886 = 2024-01-01   738900 = 2024-01-15   738917 = 2024-02-01
#   738930 = 2024-02-14   738946 = 2024-03-01   738960 = 2024-03-15
SAMPLE_XHB = """<?xml version="1.0"?>
<homebank v="1.3999999999999999" d="050504" date="738960">
<properties title="Household" curr="1" car_category="9" auto_smode="1" auto_nbdays="5"/>
<cur key="1" flags="0" iso="CAD" name="Canadian dollar" symb="$" syprf="1" dchar="." gchar="," frac="2" rate="0" mdate="0"/>
<cur key="2" iso="EUR" name="Euro" symb="E" syprf="0" dchar="," gchar=" " frac="2" rate="1.5"/>
<grp key="1" name="Everyday"/>
<account key="1" pos="1" type="1" curr="1" name="Chequing" bankname="First Bank" initial="100" minimum="0" grp="1"/>
<account key="2" flags="2" pos="2" type="4" curr="1" name="Visa" bankname="Card Co" initial="0" minimum="-5000"/>
<account key="3" pos="3" type="7" curr="1" name="Savings" bankname="First Bank" initial="1000" grp="42"/>
<pay key="1" name="Grocer"/>
<pay key="2" name="Employer" category="4" paymode="4"/>
<pay key="3" name="Landlord"/>
<cat key="1" flags="0" name="Food" b0="-400"/>
<cat key="2" parent="1" flags="1" name="Groceries" b1="-300" b2="-250"/>
<cat key="3" parent="1" flags="1" name="Restaurants"/>
<cat key="4" flags="2" name="Salary"/>
<cat key="5" flags="0" name="Rent" b0="-1500"/>
<fav key="1" amount="-10" account="1"/>
<ope date="738900" amount="-80.25" account="1" paymode="1" st="1" payee="1" category="2" wording="Weekly shop" tags="food weekly"/>
<ope date="738900" amount="2500" account="1" paymode="4" st="2" payee="2" category="4" info="Jan pay"/>
<ope date="738917" amount="-1500" account="1" paymode="2" payee="3" category="5"/>
<ope date="738930" amount="-120" account="2" paymode="1" payee="1" scat="2||3" samt="-70||-50" smem="Market||Dinner"/>
<ope date="738930" amount="-200" account="1" paymode="4" kxfer="1" dst_account="3" wording="To savings"/>
<ope date="738930" amount="200" account="3" paymode="4" dst_account="1" kxfer="1" wording="From chequing"/>
<ope date="738946" amount="-15" account="1" category="3" scat="3" samt="-15"/>
<ope date="738960" amount="-5" account="1" kxfer="0" dst_account="2"/>
</homebank>
"""


@pytest.fixture
def sample_xhb(tmp_path: Path) -> Path:
    path = tmp_path / "household.xhb"
    path.write_text(SAMPLE_XHB, encoding="utf-8")
    return path


@pytest.fixture
def sample_db(sample_xhb: Path) -> HomeBankDb:
    with open(sample_xhb, "rb") as fh:
        return build_database(fh)
