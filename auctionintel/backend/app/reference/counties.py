# app/reference/counties.py
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class CountySnapshot:
    name: str
    state: str
    tier: int
    pop: int
    income: int
    zhvi: int
    growth: float
    dom: int
    notes: str


# (state, county, population, median income, zhvi, growth yoy %, days on market, tier, notes)
_COUNTY_ROWS: tuple[tuple[str, str, int, int, int, float, int, int, str], ...] = (
    ("AL", "Shelby", 223024, 85678, 345000, 5.8, 32, 1, "Birmingham suburb"),
    ("AL", "Madison", 387545, 68234, 285000, 5.5, 32, 1, "Huntsville tech"),
    ("AL", "Baldwin", 231767, 62481, 320000, 5.8, 38, 1, "Gulf Coast"),
    ("AL", "Jefferson", 674721, 52891, 185000, 3.2, 42, 2, "Birmingham"),
    ("AL", "Mobile", 414809, 48234, 165000, 3.0, 48, 2, "Port city"),
    ("AK", "Anchorage", 291247, 84567, 365000, 2.8, 45, 1, "Urban center"),
    ("AK", "Matanuska-Susitna", 108317, 75678, 325000, 4.5, 48, 2, "Mat-Su"),
    ("AK", "Fairbanks", 97121, 72345, 275000, 2.5, 55, 2, "Interior"),
    ("AZ", "Maricopa", 4420568, 68234, 420000, 5.5, 30, 1, "Phoenix"),
    ("AZ", "Pima", 1043433, 55234, 320000, 4.2, 42, 1, "Tucson"),
    ("AZ", "Pinal", 464474, 58234, 345000, 5.8, 38, 2, "Phoenix spillover"),
    ("CA", "Los Angeles", 9829544, 72000, 850000, 3.8, 35, 1, "LA metro"),
    ("CA", "San Diego", 3286069, 82000, 880000, 4.5, 28, 1, "Biotech"),
    ("CA", "Orange", 3167809, 100000, 1050000, 4.2, 30, 1, "OC"),
    ("CA", "San Francisco", 815201, 140000, 1350000, 2.5, 30, 1, "SF"),
    ("CO", "Denver", 715522, 78000, 580000, 4.8, 28, 1, "Denver"),
    ("CO", "El Paso", 730395, 68000, 420000, 4.5, 32, 1, "CO Springs"),
    ("CO", "Boulder", 330758, 88000, 680000, 3.8, 35, 1, "CU"),
    ("FL", "Miami-Dade", 2701767, 58000, 520000, 5.8, 35, 1, "Miami"),
    ("FL", "Broward", 1944375, 62000, 450000, 5.2, 32, 1, "Ft Lauderdale"),
    ("FL", "Palm Beach", 1492191, 72000, 520000, 4.8, 38, 1, "Palm Beach"),
    ("FL", "Hillsborough", 1459762, 62000, 380000, 5.5, 30, 1, "Tampa"),
    ("FL", "Orange", 1393452, 58000, 385000, 5.2, 32, 1, "Orlando"),
    ("GA", "Fulton", 1066710, 72000, 420000, 5.2, 28, 1, "Atlanta"),
    ("GA", "Gwinnett", 936250, 72000, 380000, 4.8, 32, 1, "Atlanta NE"),
    ("GA", "Cobb", 760141, 78000, 420000, 4.5, 30, 1, "Marietta"),
    ("HI", "Honolulu", 974563, 92000, 950000, 3.2, 35, 1, "Oahu"),
    ("HI", "Hawaii", 200983, 68000, 520000, 3.5, 48, 2, "Big Island"),
    ("HI", "Maui", 164637, 78000, 980000, 3.0, 52, 2, "Maui"),
    ("NY", "Kings", 2559903, 67000, 850000, 5.1, 25, 1, "Brooklyn"),
    ("NY", "Queens", 2253858, 72500, 680000, 4.8, 30, 1, "Queens"),
    ("NY", "New York", 1629153, 93651, 1150000, 4.2, 28, 1, "Manhattan"),
    ("NY", "Nassau", 1356924, 120000, 620000, 5.5, 28, 1, "Long Island"),
    ("TX", "Harris", 4731145, 63000, 285000, 4.5, 32, 1, "Houston"),
    ("TX", "Dallas", 2613539, 62000, 320000, 5.2, 28, 1, "Dallas"),
    ("TX", "Tarrant", 2110640, 68000, 310000, 4.8, 30, 1, "Fort Worth"),
    ("TX", "Travis", 1290188, 85000, 520000, 6.5, 25, 1, "Austin"),
    ("TX", "Collin", 1064465, 110000, 480000, 5.8, 28, 1, "Plano"),
    ("ID", "Ada", 494967, 72000, 520000, 5.5, 28, 1, "Boise"),
    ("ID", "Canyon", 229849, 55000, 380000, 5.8, 35, 2, "Nampa"),
    ("IL", "Cook", 5173146, 65000, 310000, 3.2, 35, 1, "Chicago"),
    ("IL", "DuPage", 932877, 95000, 380000, 2.8, 32, 1, "West suburbs"),
    ("IN", "Hamilton", 338011, 105000, 385000, 4.5, 32, 1, "Carmel"),
    ("IN", "Marion", 977203, 52000, 215000, 4.2, 35, 2, "Indianapolis"),
    ("IA", "Polk", 492401, 68000, 265000, 3.8, 35, 2, "Des Moines"),
    ("KS", "Johnson", 609863, 92000, 350000, 3.8, 32, 1, "KC suburbs"),
    ("KY", "Jefferson", 782969, 55000, 225000, 3.5, 38, 2, "Louisville"),
    ("KY", "Fayette", 323152, 58000, 265000, 3.8, 35, 2, "Lexington"),
    ("LA", "East Baton Rouge", 456781, 55000, 235000, 3.2, 42, 2, "Baton Rouge"),
    ("LA", "Orleans", 383997, 45000, 285000, 3.5, 42, 2, "New Orleans"),
    ("ME", "Cumberland", 303069, 78000, 450000, 3.5, 38, 2, "Portland"),
    ("MD", "Montgomery", 1062061, 115000, 580000, 3.2, 32, 1, "DC suburbs"),
    ("MD", "Prince George's", 967201, 82000, 380000, 3.8, 35, 1, "DC suburbs"),
    ("MA", "Middlesex", 1632002, 105000, 680000, 3.2, 28, 1, "Cambridge"),
    ("MA", "Suffolk", 803907, 78000, 680000, 3.0, 30, 1, "Boston"),
    ("MI", "Oakland", 1274395, 78000, 320000, 3.8, 32, 1, "Detroit N"),
    ("MI", "Wayne", 1773922, 48000, 145000, 4.5, 38, 2, "Detroit"),
    ("MN", "Hennepin", 1281565, 78000, 350000, 3.5, 28, 1, "Minneapolis"),
    ("MN", "Ramsey", 552352, 65000, 295000, 3.2, 32, 1, "St. Paul"),
    ("MS", "DeSoto", 184945, 68000, 265000, 4.2, 38, 2, "Memphis sub"),
    ("MO", "St. Louis County", 1004125, 72000, 265000, 2.8, 38, 2, "STL suburbs"),
    ("MO", "Jackson", 717204, 55000, 215000, 3.2, 40, 2, "Kansas City"),
    ("MT", "Yellowstone", 164731, 58000, 350000, 4.2, 42, 2, "Billings"),
    ("MT", "Gallatin", 114434, 68000, 620000, 5.2, 38, 2, "Bozeman"),
    ("NE", "Douglas", 584526, 68000, 265000, 3.5, 35, 2, "Omaha"),
    ("NV", "Clark", 2265461, 58000, 420000, 5.5, 32, 1, "Las Vegas"),
    ("NV", "Washoe", 486492, 65000, 520000, 5.0, 35, 1, "Reno"),
    ("NH", "Hillsborough", 422937, 82000, 420000, 3.8, 32, 1, "Manchester"),
    ("NJ", "Bergen", 955732, 105000, 580000, 3.2, 32, 1, "NYC suburbs"),
    ("NJ", "Middlesex", 863162, 92000, 480000, 3.5, 32, 1, "Central NJ"),
    ("NM", "Bernalillo", 679121, 52000, 295000, 4.2, 42, 2, "Albuquerque"),
    ("NC", "Wake", 1129410, 82000, 420000, 5.2, 28, 1, "Raleigh"),
    ("NC", "Mecklenburg", 1115482, 72000, 380000, 4.8, 30, 1, "Charlotte"),
    ("ND", "Cass", 184525, 62000, 295000, 3.2, 38, 2, "Fargo"),
    ("OH", "Franklin", 1323807, 62000, 285000, 4.8, 28, 1, "Columbus"),
    ("OH", "Cuyahoga", 1235072, 52000, 165000, 2.5, 42, 2, "Cleveland"),
    ("OK", "Oklahoma", 797434, 55000, 195000, 3.5, 38, 2, "OKC"),
    ("OK", "Tulsa", 669279, 55000, 195000, 3.2, 40, 2, "Tulsa"),
    ("OR", "Multnomah", 812855, 72000, 520000, 4.0, 32, 1, "Portland"),
    ("OR", "Washington", 600372, 85000, 550000, 4.5, 30, 1, "Hillsboro"),
    ("PA", "Philadelphia", 1576251, 52000, 220000, 4.5, 35, 2, "Philadelphia"),
    ("PA", "Allegheny", 1218380, 62000, 225000, 3.8, 38, 2, "Pittsburgh"),
    ("PA", "Montgomery", 856553, 95000, 420000, 3.5, 32, 1, "Main Line"),
    ("RI", "Providence", 660741, 58000, 350000, 3.8, 38, 2, "Providence"),
    ("SC", "Charleston", 411406, 68000, 420000, 4.8, 35, 1, "Charleston"),
    ("SC", "Greenville", 523542, 62000, 285000, 4.5, 35, 2, "Greenville"),
    ("SD", "Minnehaha", 197214, 62000, 295000, 4.0, 35, 2, "Sioux Falls"),
    ("TN", "Davidson", 715884, 62000, 380000, 5.2, 32, 1, "Nashville"),
    ("TN", "Shelby", 937166, 52000, 225000, 3.8, 38, 2, "Memphis"),
    ("UT", "Salt Lake", 1160437, 72000, 520000, 5.5, 28, 1, "Salt Lake City"),
    ("UT", "Utah", 659399, 72000, 480000, 5.8, 30, 1, "Provo"),
    ("VT", "Chittenden", 168323, 78000, 450000, 3.5, 38, 2, "Burlington"),
    ("VA", "Fairfax", 1150309, 130000, 680000, 3.5, 28, 1, "Fairfax"),
    ("VA", "Prince William", 482204, 105000, 480000, 4.5, 32, 1, "Woodbridge"),
    ("VA", "Loudoun", 420959, 155000, 680000, 4.0, 30, 1, "Leesburg"),
    ("WA", "King", 2269675, 105000, 780000, 4.5, 25, 1, "Seattle"),
    ("WA", "Pierce", 921130, 72000, 480000, 5.2, 32, 1, "Tacoma"),
    ("WA", "Snohomish", 827957, 88000, 620000, 5.0, 30, 1, "Everett"),
    ("WV", "Berkeley", 119171, 62000, 265000, 4.0, 45, 2, "Martinsburg"),
    ("WI", "Milwaukee", 939489, 48000, 185000, 4.0, 38, 2, "Milwaukee"),
    ("WI", "Dane", 561504, 72000, 380000, 4.5, 32, 1, "Madison"),
    ("WY", "Laramie", 100512, 58000, 295000, 3.5, 48, 3, "Cheyenne"),
    ("WY", "Teton", 23464, 92000, 1250000, 4.0, 55, 2, "Jackson"),
    ("AR", "Benton", 284333, 72345, 295000, 5.8, 32, 1, "NW Arkansas"),
    ("AR", "Washington", 245871, 55678, 285000, 5.2, 35, 1, "Fayetteville"),
    ("CT", "Fairfield", 943332, 105000, 580000, 3.2, 38, 1, "NYC suburbs"),
    ("DE", "New Castle", 570719, 72000, 320000, 3.5, 38, 2, "Wilmington"),
)


def _build() -> Mapping[str, tuple[CountySnapshot, ...]]:
    by_state: dict[str, list[CountySnapshot]] = {}
    for state, name, pop, income, zhvi, growth, dom, tier, notes in _COUNTY_ROWS:
        by_state.setdefault(state, []).append(
            CountySnapshot(
                name=name,
                state=state,
                tier=tier,
                pop=pop,
                income=income,
                zhvi=zhvi,
                growth=growth,
                dom=dom,
                notes=notes,
            )
        )
    return MappingProxyType({k: tuple(v) for k, v in by_state.items()})


COUNTIES: Mapping[str, tuple[CountySnapshot, ...]] = _build()


def list_counties(state: str | None = None) -> list[CountySnapshot]:
    """
    Curated county snapshots, best tier first, fastest growth first within a tier.
    Unknown state => [].
    """
    if state is not None:
        rows = list(COUNTIES.get(state.upper(), ()))
    else:
        rows = [c for counties in COUNTIES.values() for c in counties]
    return sorted(rows, key=lambda c: (c.tier, -c.growth))
