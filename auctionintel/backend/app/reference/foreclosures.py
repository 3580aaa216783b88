# app/reference/foreclosures.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Mapping

from ..domain.numbers import round_half_away
from .states import STATE_NAMES

# Aggregated HUD / Fannie Mae / Freddie Mac activity, as of this snapshot
SNAPSHOT_MONTH = "January"
SNAPSHOT_YEAR = 2026


@dataclass(frozen=True)
class ForeclosureProperty:
    address: str
    city: str
    state: str
    zip: str
    price: float
    bedrooms: int
    bathrooms: float
    sqft: int
    property_type: str
    source: str
    listing_date: str
    status: str = "Available"


@dataclass(frozen=True)
class ForeclosureSummary:
    state: str
    state_name: str
    total_listings: int
    avg_price: float
    hud_count: int
    fannie_count: int
    freddie_count: int
    foreclosure_rate: float  # per 10,000 housing units
    yoy_change: float
    avg_days_on_market: int
    updated: str


@dataclass(frozen=True)
class NationalTrends:
    total_foreclosures: int
    total_states: int
    avg_foreclosure_rate: float
    top_state: str
    top_state_count: int
    total_hud: int
    total_fannie: int
    total_freddie: int
    month: str
    year: int


# (address, city, state, zip, price, beds, baths, sqft, property type, source)
_SAMPLE_ROWS: tuple[tuple[str, str, str, str, float, int, float, int, str, str], ...] = (
    ("1234 Palm Ave", "Miami", "FL", "33125", 285000.0, 3, 2.0, 1450, "Single Family", "HUD"),
    ("5678 Ocean Dr", "Tampa", "FL", "33602", 195000.0, 2, 1.5, 1100, "Condo", "HUD"),
    ("9012 Sunset Blvd", "Orlando", "FL", "32801", 225000.0, 3, 2.0, 1350, "Single Family", "Fannie Mae"),
    ("3456 Beach Rd", "Jacksonville", "FL", "32202", 165000.0, 2, 1.0, 950, "Townhouse", "Freddie Mac"),
    ("7890 Keys Way", "Fort Lauderdale", "FL", "33301", 315000.0, 4, 2.5, 1800, "Single Family", "HUD"),
    ("9012 Longhorn Blvd", "Houston", "TX", "77001", 175000.0, 3, 2.0, 1600, "Single Family", "HUD"),
    ("3456 Ranch Rd", "Dallas", "TX", "75201", 225000.0, 4, 2.5, 1850, "Single Family", "HUD"),
    ("7890 Alamo St", "San Antonio", "TX", "78201", 145000.0, 3, 1.5, 1200, "Single Family", "Fannie Mae"),
    ("1234 Capital Ave", "Austin", "TX", "78701", 325000.0, 3, 2.0, 1500, "Single Family", "Freddie Mac"),
    ("5678 Rio Grande", "El Paso", "TX", "79901", 135000.0, 3, 2.0, 1300, "Single Family", "HUD"),
    ("1234 Hollywood Blvd", "Los Angeles", "CA", "90028", 585000.0, 3, 2.0, 1400, "Single Family", "HUD"),
    ("5678 Bay St", "San Francisco", "CA", "94102", 725000.0, 2, 1.0, 1100, "Condo", "Fannie Mae"),
    ("9012 Valley Way", "Fresno", "CA", "93701", 285000.0, 3, 2.0, 1500, "Single Family", "HUD"),
    ("3456 Coast Hwy", "San Diego", "CA", "92101", 485000.0, 3, 2.0, 1350, "Single Family", "Freddie Mac"),
    ("7890 Wine Country", "Sacramento", "CA", "95814", 345000.0, 4, 2.5, 1700, "Single Family", "HUD"),
    ("7890 Peachtree St", "Atlanta", "GA", "30301", 265000.0, 3, 2.0, 1700, "Single Family", "HUD"),
    ("1234 Magnolia Ln", "Savannah", "GA", "31401", 185000.0, 3, 2.0, 1400, "Single Family", "Fannie Mae"),
    ("5678 Augusta Way", "Augusta", "GA", "30901", 125000.0, 2, 1.0, 1000, "Single Family", "HUD"),
    ("9012 Macon Rd", "Macon", "GA", "31201", 115000.0, 3, 1.5, 1200, "Single Family", "Freddie Mac"),
    ("1234 Buckeye St", "Columbus", "OH", "43215", 145000.0, 3, 1.5, 1300, "Single Family", "HUD"),
    ("5678 Lake Erie Dr", "Cleveland", "OH", "44114", 85000.0, 3, 1.0, 1100, "Single Family", "HUD"),
    ("9012 River Rd", "Cincinnati", "OH", "45202", 125000.0, 2, 1.0, 950, "Single Family", "Fannie Mae"),
    ("3456 Dayton Ave", "Dayton", "OH", "45402", 95000.0, 3, 1.5, 1200, "Single Family", "HUD"),
    ("1234 Motor City Blvd", "Detroit", "MI", "48201", 45000.0, 3, 1.0, 1200, "Single Family", "HUD"),
    ("5678 Grand Rapids Ave", "Grand Rapids", "MI", "49503", 165000.0, 3, 2.0, 1400, "Single Family", "Fannie Mae"),
    ("9012 Lansing Way", "Lansing", "MI", "48933", 115000.0, 3, 1.5, 1250, "Single Family", "HUD"),
    ("1234 Liberty Bell Ln", "Philadelphia", "PA", "19103", 175000.0, 3, 1.5, 1300, "Rowhouse", "HUD"),
    ("5678 Steel City Rd", "Pittsburgh", "PA", "15222", 125000.0, 3, 1.0, 1100, "Single Family", "HUD"),
    ("9012 Allentown Ave", "Allentown", "PA", "18101", 145000.0, 3, 1.5, 1200, "Single Family", "Fannie Mae"),
    ("1234 Garden State Pkwy", "Newark", "NJ", "07102", 225000.0, 3, 1.5, 1200, "Single Family", "HUD"),
    ("5678 Shore Dr", "Jersey City", "NJ", "07302", 345000.0, 2, 1.0, 950, "Condo", "Fannie Mae"),
    ("9012 Trenton Way", "Trenton", "NJ", "08608", 145000.0, 3, 1.5, 1150, "Single Family", "HUD"),
    ("1234 Windy City Ave", "Chicago", "IL", "60601", 185000.0, 3, 1.5, 1300, "Single Family", "HUD"),
    ("5678 Prairie Rd", "Springfield", "IL", "62701", 95000.0, 3, 1.0, 1100, "Single Family", "HUD"),
    ("9012 Rockford St", "Rockford", "IL", "61101", 85000.0, 3, 1.5, 1200, "Single Family", "Fannie Mae"),
    ("1234 Tar Heel Way", "Charlotte", "NC", "28202", 245000.0, 3, 2.0, 1500, "Single Family", "HUD"),
    ("5678 Research Triangle", "Raleigh", "NC", "27601", 275000.0, 4, 2.5, 1800, "Single Family", "Fannie Mae"),
    ("9012 Blue Ridge Pkwy", "Asheville", "NC", "28801", 285000.0, 3, 2.0, 1450, "Single Family", "HUD"),
    ("1234 Empire State Rd", "Buffalo", "NY", "14201", 95000.0, 3, 1.0, 1200, "Single Family", "HUD"),
    ("5678 Hudson Valley", "Albany", "NY", "12207", 145000.0, 3, 1.5, 1300, "Single Family", "Fannie Mae"),
    ("9012 Syracuse Way", "Syracuse", "NY", "13202", 115000.0, 3, 1.5, 1150, "Single Family", "HUD"),
    ("2468 Desert View", "Phoenix", "AZ", "85001", 315000.0, 4, 2.5, 2100, "Single Family", "HUD"),
    ("1357 Saguaro Dr", "Tucson", "AZ", "85701", 195000.0, 3, 2.0, 1500, "Single Family", "Fannie Mae"),
    ("9876 Mesa Rd", "Mesa", "AZ", "85201", 245000.0, 3, 2.0, 1650, "Single Family", "HUD"),
    ("1234 Hoosier Way", "Indianapolis", "IN", "46204", 125000.0, 3, 1.5, 1300, "Single Family", "HUD"),
    ("5678 Fort Wayne Ave", "Fort Wayne", "IN", "46802", 95000.0, 3, 1.0, 1100, "Single Family", "Fannie Mae"),
    ("1234 Hawkeye St", "Des Moines", "IA", "50309", 145000.0, 3, 2.0, 1400, "Single Family", "HUD"),
    ("5678 Cedar Rapids Rd", "Cedar Rapids", "IA", "52401", 125000.0, 3, 1.5, 1250, "Single Family", "HUD"),
    ("1234 Chesapeake Bay Dr", "Baltimore", "MD", "21201", 165000.0, 3, 1.5, 1200, "Rowhouse", "HUD"),
    ("5678 Annapolis Way", "Annapolis", "MD", "21401", 285000.0, 3, 2.0, 1450, "Single Family", "Fannie Mae"),
    ("1234 Las Vegas Blvd", "Las Vegas", "NV", "89101", 285000.0, 3, 2.0, 1600, "Single Family", "HUD"),
    ("5678 Reno Ave", "Reno", "NV", "89501", 245000.0, 3, 2.0, 1450, "Single Family", "Fannie Mae"),
    ("1234 Colonial Way", "Virginia Beach", "VA", "23451", 285000.0, 4, 2.5, 1800, "Single Family", "HUD"),
    ("5678 Richmond Rd", "Richmond", "VA", "23219", 195000.0, 3, 2.0, 1400, "Single Family", "Fannie Mae"),
    ("9012 Norfolk Ave", "Norfolk", "VA", "23510", 165000.0, 3, 1.5, 1250, "Single Family", "HUD"),
    ("1234 Music Row", "Nashville", "TN", "37203", 285000.0, 3, 2.0, 1550, "Single Family", "HUD"),
    ("5678 Beale St", "Memphis", "TN", "38103", 145000.0, 3, 1.5, 1300, "Single Family", "Fannie Mae"),
    ("9012 Smoky Mountain Rd", "Knoxville", "TN", "37902", 175000.0, 3, 2.0, 1400, "Single Family", "HUD"),
    ("1234 Palmetto Ave", "Charleston", "SC", "29401", 285000.0, 3, 2.0, 1500, "Single Family", "HUD"),
    ("5678 Columbia Way", "Columbia", "SC", "29201", 165000.0, 3, 1.5, 1300, "Single Family", "Fannie Mae"),
    ("1234 Crimson Tide Blvd", "Birmingham", "AL", "35203", 145000.0, 3, 2.0, 1400, "Single Family", "HUD"),
    ("5678 Mobile Bay Dr", "Mobile", "AL", "36602", 125000.0, 3, 1.5, 1250, "Single Family", "Fannie Mae"),
    ("1234 Gateway Arch Way", "St. Louis", "MO", "63101", 125000.0, 3, 1.5, 1300, "Single Family", "HUD"),
    ("5678 Kansas City Blvd", "Kansas City", "MO", "64102", 145000.0, 3, 2.0, 1400, "Single Family", "Fannie Mae"),
    ("1234 Dairy State Dr", "Milwaukee", "WI", "53202", 145000.0, 3, 1.5, 1300, "Single Family", "HUD"),
    ("5678 Madison Ave", "Madison", "WI", "53703", 225000.0, 3, 2.0, 1450, "Single Family", "Fannie Mae"),
    ("1234 Bourbon St", "New Orleans", "LA", "70112", 185000.0, 3, 2.0, 1400, "Single Family", "HUD"),
    ("5678 Baton Rouge Rd", "Baton Rouge", "LA", "70801", 145000.0, 3, 1.5, 1250, "Single Family", "Fannie Mae"),
    ("1234 Bluegrass Way", "Louisville", "KY", "40202", 145000.0, 3, 1.5, 1300, "Single Family", "HUD"),
    ("5678 Lexington Ave", "Lexington", "KY", "40507", 165000.0, 3, 2.0, 1400, "Single Family", "Fannie Mae"),
    ("1234 Sooner State Dr", "Oklahoma City", "OK", "73102", 135000.0, 3, 2.0, 1400, "Single Family", "HUD"),
    ("5678 Tulsa Way", "Tulsa", "OK", "74103", 125000.0, 3, 1.5, 1300, "Single Family", "Fannie Mae"),
    ("1234 Rose City Ave", "Portland", "OR", "97201", 385000.0, 3, 2.0, 1450, "Single Family", "HUD"),
    ("5678 Eugene Way", "Eugene", "OR", "97401", 285000.0, 3, 2.0, 1350, "Single Family", "Fannie Mae"),
    ("1234 Rocky Mountain Blvd", "Denver", "CO", "80202", 385000.0, 3, 2.0, 1500, "Single Family", "HUD"),
    ("5678 Springs Way", "Colorado Springs", "CO", "80903", 285000.0, 3, 2.0, 1400, "Single Family", "Fannie Mae"),
    ("1234 Emerald City Ave", "Seattle", "WA", "98101", 485000.0, 3, 2.0, 1400, "Single Family", "HUD"),
    ("5678 Tacoma Way", "Tacoma", "WA", "98402", 345000.0, 3, 2.0, 1350, "Single Family", "Fannie Mae"),
    ("9012 Spokane Rd", "Spokane", "WA", "99201", 225000.0, 3, 1.5, 1250, "Single Family", "HUD"),
    ("1234 Constitution Ave", "Hartford", "CT", "06103", 185000.0, 3, 1.5, 1250, "Single Family", "HUD"),
    ("5678 New Haven Way", "New Haven", "CT", "06510", 225000.0, 3, 2.0, 1350, "Single Family", "Fannie Mae"),
    ("1234 Pilgrim Way", "Boston", "MA", "02108", 485000.0, 2, 1.0, 1100, "Condo", "HUD"),
    ("5678 Worcester Rd", "Worcester", "MA", "01608", 285000.0, 3, 1.5, 1300, "Single Family", "Fannie Mae"),
    ("1234 Twin Cities Blvd", "Minneapolis", "MN", "55401", 225000.0, 3, 2.0, 1400, "Single Family", "HUD"),
    ("5678 St. Paul Ave", "St. Paul", "MN", "55101", 195000.0, 3, 1.5, 1300, "Single Family", "Fannie Mae"),
    ("1234 Sunflower Way", "Wichita", "KS", "67202", 125000.0, 3, 1.5, 1300, "Single Family", "HUD"),
    ("5678 Topeka Ave", "Topeka", "KS", "66603", 105000.0, 3, 1.0, 1150, "Single Family", "Fannie Mae"),
    ("1234 Natural State Dr", "Little Rock", "AR", "72201", 145000.0, 3, 2.0, 1400, "Single Family", "HUD"),
    ("5678 Fayetteville Rd", "Fayetteville", "AR", "72701", 185000.0, 3, 2.0, 1450, "Single Family", "Fannie Mae"),
    ("1234 Magnolia State Ave", "Jackson", "MS", "39201", 115000.0, 3, 1.5, 1300, "Single Family", "HUD"),
    ("5678 Gulf Coast Dr", "Gulfport", "MS", "39501", 145000.0, 3, 2.0, 1400, "Single Family", "Fannie Mae"),
    ("1234 Cornhusker Way", "Omaha", "NE", "68102", 165000.0, 3, 2.0, 1400, "Single Family", "HUD"),
    ("5678 Lincoln Ave", "Lincoln", "NE", "68508", 145000.0, 3, 1.5, 1300, "Single Family", "Fannie Mae"),
    ("1234 Land of Enchantment", "Albuquerque", "NM", "87102", 225000.0, 3, 2.0, 1450, "Single Family", "HUD"),
    ("5678 Santa Fe Trail", "Santa Fe", "NM", "87501", 285000.0, 3, 2.0, 1500, "Single Family", "Fannie Mae"),
    ("1234 Beehive State Dr", "Salt Lake City", "UT", "84101", 345000.0, 3, 2.0, 1500, "Single Family", "HUD"),
    ("5678 Provo Way", "Provo", "UT", "84601", 285000.0, 3, 2.0, 1400, "Single Family", "Fannie Mae"),
    ("1234 Mountain State Way", "Charleston", "WV", "25301", 95000.0, 3, 1.5, 1250, "Single Family", "HUD"),
    ("5678 Huntington Ave", "Huntington", "WV", "25701", 85000.0, 3, 1.0, 1100, "Single Family", "Fannie Mae"),
    ("1234 Gem State Blvd", "Boise", "ID", "83702", 325000.0, 3, 2.0, 1500, "Single Family", "HUD"),
    ("5678 Idaho Falls Rd", "Idaho Falls", "ID", "83402", 225000.0, 3, 2.0, 1350, "Single Family", "Fannie Mae"),
    ("1234 Aloha Way", "Honolulu", "HI", "96813", 685000.0, 3, 2.0, 1400, "Single Family", "HUD"),
    ("5678 Maui Dr", "Kahului", "HI", "96732", 545000.0, 3, 2.0, 1350, "Single Family", "Fannie Mae"),
    ("1234 Pine Tree Way", "Portland", "ME", "04101", 245000.0, 3, 1.5, 1300, "Single Family", "HUD"),
    ("1234 Granite State Dr", "Manchester", "NH", "03101", 285000.0, 3, 2.0, 1400, "Single Family", "HUD"),
    ("1234 Ocean State Ave", "Providence", "RI", "02903", 265000.0, 3, 1.5, 1250, "Single Family", "HUD"),
    ("1234 Green Mountain Rd", "Burlington", "VT", "05401", 285000.0, 3, 2.0, 1350, "Single Family", "HUD"),
    ("1234 First State Way", "Wilmington", "DE", "19801", 225000.0, 3, 1.5, 1300, "Single Family", "HUD"),
    ("1234 Capitol Hill", "Washington", "DC", "20001", 485000.0, 3, 2.0, 1400, "Rowhouse", "HUD"),
    ("1234 Big Sky Way", "Billings", "MT", "59101", 285000.0, 3, 2.0, 1450, "Single Family", "HUD"),
    ("1234 Peace Garden State", "Fargo", "ND", "58102", 225000.0, 3, 2.0, 1400, "Single Family", "HUD"),
    ("1234 Mount Rushmore Way", "Sioux Falls", "SD", "57104", 225000.0, 3, 2.0, 1400, "Single Family", "HUD"),
    ("1234 Equality State Dr", "Cheyenne", "WY", "82001", 265000.0, 3, 2.0, 1450, "Single Family", "HUD"),
    ("1234 Last Frontier Way", "Anchorage", "AK", "99501", 325000.0, 3, 2.0, 1500, "Single Family", "HUD"),
)

# (state, name, total, avg price, hud, fannie, freddie, rate per 10k, yoy %, avg dom)
_STATS_ROWS: tuple[tuple[str, str, int, float, int, int, int, float, float, int], ...] = (
    ("FL", "Florida", 45000, 285000.0, 1200, 800, 500, 4.8, 12.5, 45),
    ("TX", "Texas", 38000, 225000.0, 950, 700, 450, 3.2, 8.2, 42),
    ("CA", "California", 35000, 485000.0, 850, 650, 400, 2.4, 15.3, 55),
    ("GA", "Georgia", 22000, 265000.0, 600, 400, 250, 4.5, 10.8, 38),
    ("OH", "Ohio", 18000, 145000.0, 500, 350, 200, 3.8, 5.2, 52),
    ("MI", "Michigan", 16000, 165000.0, 450, 300, 180, 3.5, 6.8, 48),
    ("IL", "Illinois", 15000, 195000.0, 420, 280, 170, 2.9, 4.5, 65),
    ("NJ", "New Jersey", 14000, 325000.0, 400, 260, 160, 3.8, 18.2, 75),
    ("PA", "Pennsylvania", 13000, 175000.0, 380, 240, 150, 2.5, 3.8, 58),
    ("AZ", "Arizona", 12000, 315000.0, 350, 220, 140, 3.9, 22.5, 35),
    ("NC", "North Carolina", 11000, 245000.0, 320, 200, 130, 2.6, 7.5, 42),
    ("NY", "New York", 10000, 385000.0, 300, 180, 120, 1.2, 2.8, 95),
    ("IN", "Indiana", 9000, 155000.0, 280, 170, 110, 3.4, 4.2, 45),
    ("TN", "Tennessee", 8500, 235000.0, 260, 160, 100, 3.0, 9.5, 40),
    ("SC", "South Carolina", 8000, 225000.0, 240, 150, 95, 3.6, 11.2, 38),
    ("NV", "Nevada", 7500, 345000.0, 220, 140, 90, 5.2, 28.5, 32),
    ("MD", "Maryland", 7000, 295000.0, 200, 130, 85, 2.8, 5.5, 62),
    ("MO", "Missouri", 6500, 165000.0, 190, 120, 80, 2.6, 3.2, 48),
    ("CO", "Colorado", 6000, 425000.0, 175, 110, 75, 2.5, 18.8, 38),
    ("VA", "Virginia", 5800, 315000.0, 170, 105, 70, 1.8, 4.5, 52),
    ("AL", "Alabama", 5500, 165000.0, 160, 100, 65, 2.8, 2.5, 55),
    ("WI", "Wisconsin", 5200, 185000.0, 155, 95, 60, 2.2, 3.8, 58),
    ("LA", "Louisiana", 5000, 175000.0, 150, 90, 55, 2.9, 5.2, 62),
    ("OK", "Oklahoma", 4800, 145000.0, 140, 85, 50, 3.0, 4.8, 48),
    ("KY", "Kentucky", 4500, 155000.0, 135, 80, 45, 2.5, 3.5, 52),
    ("OR", "Oregon", 4200, 385000.0, 125, 75, 40, 2.4, 12.5, 45),
    ("CT", "Connecticut", 4000, 285000.0, 120, 70, 35, 2.8, 8.5, 72),
    ("WA", "Washington", 3800, 425000.0, 115, 65, 30, 2.0, 10.2, 42),
    ("KS", "Kansas", 3500, 145000.0, 110, 60, 28, 2.6, 2.8, 55),
    ("IA", "Iowa", 3200, 165000.0, 100, 55, 25, 2.2, 1.5, 48),
    ("AR", "Arkansas", 3000, 135000.0, 95, 50, 22, 2.4, 3.2, 52),
    ("MS", "Mississippi", 2800, 125000.0, 90, 45, 20, 2.6, 2.8, 58),
    ("NE", "Nebraska", 2500, 175000.0, 80, 40, 18, 2.0, 1.8, 45),
    ("UT", "Utah", 2400, 385000.0, 75, 38, 16, 1.8, 15.5, 35),
    ("NM", "New Mexico", 2200, 225000.0, 70, 35, 14, 2.8, 5.2, 58),
    ("WV", "West Virginia", 2000, 95000.0, 65, 32, 12, 2.5, 1.2, 65),
    ("ID", "Idaho", 1800, 345000.0, 60, 28, 10, 2.2, 18.5, 38),
    ("ME", "Maine", 1600, 225000.0, 55, 25, 8, 2.0, 4.5, 62),
    ("NH", "New Hampshire", 1500, 325000.0, 50, 22, 6, 1.8, 5.8, 55),
    ("RI", "Rhode Island", 1400, 285000.0, 45, 20, 5, 2.5, 6.2, 65),
    ("MT", "Montana", 1200, 325000.0, 40, 18, 4, 1.5, 8.5, 48),
    ("DE", "Delaware", 1100, 265000.0, 38, 16, 3, 2.4, 4.2, 58),
    ("HI", "Hawaii", 1000, 685000.0, 35, 14, 2, 1.2, 5.5, 72),
    ("SD", "South Dakota", 900, 225000.0, 32, 12, 2, 1.4, 2.8, 45),
    ("ND", "North Dakota", 800, 225000.0, 28, 10, 2, 1.2, 1.5, 52),
    ("AK", "Alaska", 700, 325000.0, 25, 8, 2, 1.5, 3.2, 65),
    ("DC", "District of Columbia", 650, 485000.0, 22, 6, 2, 2.0, 8.5, 75),
    ("VT", "Vermont", 600, 285000.0, 20, 5, 2, 1.2, 2.5, 68),
    ("WY", "Wyoming", 500, 285000.0, 18, 4, 2, 1.0, 2.2, 52),
    ("MN", "Minnesota", 4800, 245000.0, 145, 85, 50, 2.0, 3.5, 48),
    ("MA", "Massachusetts", 4500, 425000.0, 140, 80, 45, 1.5, 4.2, 72),
)

_SAMPLES_BY_STATE: Mapping[str, tuple[tuple, ...]] = MappingProxyType({
    st: tuple(r for r in _SAMPLE_ROWS if r[2] == st)
    for st in {r[2] for r in _SAMPLE_ROWS}
})


def _today() -> str:
    return date.today().isoformat()


def state_foreclosures(state: str) -> list[ForeclosureProperty]:
    """Sample REO listings for a state; [] when none are on file."""
    today = _today()
    return [
        ForeclosureProperty(
            address=addr,
            city=city,
            state=st,
            zip=zipc,
            price=price,
            bedrooms=beds,
            bathrooms=baths,
            sqft=sqft,
            property_type=ptype,
            source=src,
            listing_date=today,
        )
        for addr, city, st, zipc, price, beds, baths, sqft, ptype, src in _SAMPLES_BY_STATE.get(state.upper(), ())
    ]


def foreclosure_stats() -> dict[str, ForeclosureSummary]:
    today = _today()
    return {
        st: ForeclosureSummary(
            state=st,
            state_name=STATE_NAMES.get(st, name),
            total_listings=total,
            avg_price=avg_price,
            hud_count=hud,
            fannie_count=fannie,
            freddie_count=freddie,
            foreclosure_rate=rate,
            yoy_change=yoy,
            avg_days_on_market=dom,
            updated=today,
        )
        for st, name, total, avg_price, hud, fannie, freddie, rate, yoy, dom in _STATS_ROWS
    }


def national_trends() -> NationalTrends:
    stats = list(foreclosure_stats().values())
    top = max(stats, key=lambda s: s.total_listings)
    avg_rate = sum(s.foreclosure_rate for s in stats) / len(stats)
    return NationalTrends(
        total_foreclosures=sum(s.total_listings for s in stats),
        total_states=len(stats),
        avg_foreclosure_rate=round_half_away(avg_rate, 2),
        top_state=top.state,
        top_state_count=top.total_listings,
        total_hud=sum(s.hud_count for s in stats),
        total_fannie=sum(s.fannie_count for s in stats),
        total_freddie=sum(s.freddie_count for s in stats),
        month=SNAPSHOT_MONTH,
        year=SNAPSHOT_YEAR,
    )
