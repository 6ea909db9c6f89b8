"""Static Panchang label tables.

Every row carries the Latin-script name next to its Devanagari (Hindi) name
so both tracks always come from the same table entry.
"""

from __future__ import annotations

from typing import NamedTuple, Tuple


class Label(NamedTuple):
    name: str
    hindi: str


class NakshatraRow(NamedTuple):
    name: str
    hindi: str
    lord: str
    lord_hindi: str
    deity: str


class RashiRow(NamedTuple):
    name: str
    english: str
    hindi: str


class RituRow(NamedTuple):
    name: str
    hindi: str
    season: str


# 0 = Sunday
VARA: Tuple[Label, ...] = (
    Label("Sunday", "रविवार"),
    Label("Monday", "सोमवार"),
    Label("Tuesday", "मंगलवार"),
    Label("Wednesday", "बुधवार"),
    Label("Thursday", "गुरुवार"),
    Label("Friday", "शुक्रवार"),
    Label("Saturday", "शनिवार"),
)

PAKSHA = {
    "Shukla": Label("Shukla", "शुक्ल"),
    "Krishna": Label("Krishna", "कृष्ण"),
}

_TITHI_BASE: Tuple[Label, ...] = (
    Label("Pratipada", "प्रतिपदा"),
    Label("Dwitiya", "द्वितीया"),
    Label("Tritiya", "तृतीया"),
    Label("Chaturthi", "चतुर्थी"),
    Label("Panchami", "पंचमी"),
    Label("Shashthi", "षष्ठी"),
    Label("Saptami", "सप्तमी"),
    Label("Ashtami", "अष्टमी"),
    Label("Navami", "नवमी"),
    Label("Dashami", "दशमी"),
    Label("Ekadashi", "एकादशी"),
    Label("Dwadashi", "द्वादशी"),
    Label("Trayodashi", "त्रयोदशी"),
    Label("Chaturdashi", "चतुर्दशी"),
)

# 30 entries: the 14 phase names once per paksha, closed by Purnima / Amavasya.
TITHIS: Tuple[Label, ...] = (
    _TITHI_BASE
    + (Label("Purnima", "पूर्णिमा"),)
    + _TITHI_BASE
    + (Label("Amavasya", "अमावस्या"),)
)

NAKSHATRAS: Tuple[NakshatraRow, ...] = (
    NakshatraRow("Ashwini", "अश्विनी", "Ketu", "केतु", "Ashwini Kumaras"),
    NakshatraRow("Bharani", "भरणी", "Venus", "शुक्र", "Yama"),
    NakshatraRow("Krittika", "कृत्तिका", "Sun", "सूर्य", "Agni"),
    NakshatraRow("Rohini", "रोहिणी", "Moon", "चंद्र", "Brahma"),
    NakshatraRow("Mrigashira", "मृगशिरा", "Mars", "मंगल", "Soma"),
    NakshatraRow("Ardra", "आर्द्रा", "Rahu", "राहु", "Rudra"),
    NakshatraRow("Punarvasu", "पुनर्वसु", "Jupiter", "बृहस्पति", "Aditi"),
    NakshatraRow("Pushya", "पुष्य", "Saturn", "शनि", "Brihaspati"),
    NakshatraRow("Ashlesha", "आश्लेषा", "Mercury", "बुध", "Nagas"),
    NakshatraRow("Magha", "मघा", "Ketu", "केतु", "Pitris"),
    NakshatraRow("Purva Phalguni", "पूर्वा फाल्गुनी", "Venus", "शुक्र", "Bhaga"),
    NakshatraRow("Uttara Phalguni", "उत्तरा फाल्गुनी", "Sun", "सूर्य", "Aryaman"),
    NakshatraRow("Hasta", "हस्त", "Moon", "चंद्र", "Savitar"),
    NakshatraRow("Chitra", "चित्रा", "Mars", "मंगल", "Tvashtar"),
    NakshatraRow("Swati", "स्वाति", "Rahu", "राहु", "Vayu"),
    NakshatraRow("Vishakha", "विशाखा", "Jupiter", "बृहस्पति", "Indra-Agni"),
    NakshatraRow("Anuradha", "अनुराधा", "Saturn", "शनि", "Mitra"),
    NakshatraRow("Jyeshtha", "ज्येष्ठा", "Mercury", "बुध", "Indra"),
    NakshatraRow("Mula", "मूल", "Ketu", "केतु", "Nirriti"),
    NakshatraRow("Purva Ashadha", "पूर्वाषाढ़ा", "Venus", "शुक्र", "Apas"),
    NakshatraRow("Uttara Ashadha", "उत्तराषाढ़ा", "Sun", "सूर्य", "Vishvadevas"),
    NakshatraRow("Shravana", "श्रवण", "Moon", "चंद्र", "Vishnu"),
    NakshatraRow("Dhanishta", "धनिष्ठा", "Mars", "मंगल", "Vasus"),
    NakshatraRow("Shatabhisha", "शतभिषा", "Rahu", "राहु", "Varuna"),
    NakshatraRow("Purva Bhadrapada", "पूर्वा भाद्रपद", "Jupiter", "बृहस्पति", "Aja Ekapada"),
    NakshatraRow("Uttara Bhadrapada", "उत्तरा भाद्रपद", "Saturn", "शनि", "Ahir Budhnya"),
    NakshatraRow("Revati", "रेवती", "Mercury", "बुध", "Pushan"),
)

YOGAS: Tuple[Label, ...] = (
    Label("Vishkumbha", "विष्कुम्भ"),
    Label("Preeti", "प्रीति"),
    Label("Ayushman", "आयुष्मान"),
    Label("Saubhagya", "सौभाग्य"),
    Label("Shobhana", "शोभन"),
    Label("Atiganda", "अतिगण्ड"),
    Label("Sukarma", "सुकर्मा"),
    Label("Dhriti", "धृति"),
    Label("Shoola", "शूल"),
    Label("Ganda", "गण्ड"),
    Label("Vriddhi", "वृद्धि"),
    Label("Dhruva", "ध्रुव"),
    Label("Vyaghata", "व्याघात"),
    Label("Harshana", "हर्षण"),
    Label("Vajra", "वज्र"),
    Label("Siddhi", "सिद्धि"),
    Label("Vyatipata", "व्यतीपात"),
    Label("Variyan", "वरीयान"),
    Label("Parigha", "परिघ"),
    Label("Shiva", "शिव"),
    Label("Siddha", "सिद्ध"),
    Label("Sadhya", "साध्य"),
    Label("Shubha", "शुभ"),
    Label("Shukla", "शुक्ल"),
    Label("Brahma", "ब्रह्म"),
    Label("Indra", "इन्द्र"),
    Label("Vaidhriti", "वैधृति"),
)

KARANAS: Tuple[Label, ...] = (
    Label("Bava", "बव"),
    Label("Balava", "बालव"),
    Label("Kaulava", "कौलव"),
    Label("Taitila", "तैतिल"),
    Label("Garaja", "गर"),
    Label("Vanija", "वणिज"),
    Label("Vishti", "विष्टि"),
    Label("Shakuni", "शकुनि"),
    Label("Chatushpada", "चतुष्पद"),
    Label("Naga", "नाग"),
    Label("Kimstughna", "किंस्तुघ्न"),
)

RASHIS: Tuple[RashiRow, ...] = (
    RashiRow("Mesha", "Aries", "मेष"),
    RashiRow("Vrishabha", "Taurus", "वृषभ"),
    RashiRow("Mithuna", "Gemini", "मिथुन"),
    RashiRow("Karka", "Cancer", "कर्क"),
    RashiRow("Simha", "Leo", "सिंह"),
    RashiRow("Kanya", "Virgo", "कन्या"),
    RashiRow("Tula", "Libra", "तुला"),
    RashiRow("Vrishchika", "Scorpio", "वृश्चिक"),
    RashiRow("Dhanu", "Sagittarius", "धनु"),
    RashiRow("Makara", "Capricorn", "मकर"),
    RashiRow("Kumbha", "Aquarius", "कुम्भ"),
    RashiRow("Meena", "Pisces", "मीन"),
)

MASA: Tuple[Label, ...] = (
    Label("Chaitra", "चैत्र"),
    Label("Vaishakha", "वैशाख"),
    Label("Jyeshtha", "ज्येष्ठ"),
    Label("Ashadha", "आषाढ़"),
    Label("Shravana", "श्रावण"),
    Label("Bhadrapada", "भाद्रपद"),
    Label("Ashwin", "आश्विन"),
    Label("Kartik", "कार्तिक"),
    Label("Margashirsha", "मार्गशीर्ष"),
    Label("Pausha", "पौष"),
    Label("Magha", "माघ"),
    Label("Phalguna", "फाल्गुन"),
)

RITUS: Tuple[RituRow, ...] = (
    RituRow("Vasanta", "वसंत", "Spring"),
    RituRow("Grishma", "ग्रीष्म", "Summer"),
    RituRow("Varsha", "वर्षा", "Monsoon"),
    RituRow("Sharad", "शरद", "Autumn"),
    RituRow("Hemanta", "हेमंत", "Pre-winter"),
    RituRow("Shishira", "शिशिर", "Winter"),
)

AYANA = {
    "ascending": Label("Uttarayana", "उत्तरायण"),
    "descending": Label("Dakshinayana", "दक्षिणायन"),
}

PANCHAKA_TYPES: Tuple[Label, ...] = (
    Label("Good", "शुभ"),
    Label("Mrityu", "मृत्यु"),
    Label("Agni", "अग्नि"),
    Label("Raja", "राज"),
    Label("Chora", "चोर"),
    Label("Roga", "रोग"),
)

DAY_TYPES = {
    "Auspicious": Label("Auspicious", "शुभ"),
    "Inauspicious": Label("Inauspicious", "अशुभ"),
    "Mixed": Label("Mixed", "मिश्रित"),
}

ACTIVITIES = {
    "property_and_home": Label("Property & Home", "संपत्ति और गृह"),
    "religious_and_spiritual": Label("Religious & Spiritual", "धार्मिक और आध्यात्मिक"),
    "general_activities": Label("General Activities", "सामान्य कार्य"),
}
