# ABOUTME: Keyword-based categorization of historical events.
# ABOUTME: Maps normalized event text to semantic category tags with whole-word matching.

import re

from on_this_day.utils.text import normalize_text

DEFAULT_CATEGORY = "General"

# Category name -> keywords and phrases. "General" is the fallback, never a key.
# fmt: off
CATEGORY_KEYWORDS: dict[str, list[str]] = {
    "Politics": [
        "government", "state", "nation", "republic", "empire", "kingdom", "monarchy", "dynasty",
        "parliament", "congress", "senate", "assembly", "cabinet", "ministry", "council",
        "judiciary", "court", "chancellor", "prime minister", "president", "governor", "mayor",
        "diplomat", "ambassador", "constitution", "charter", "charters", "chartered",
        "chartering", "decree", "decrees", "decreed", "decreeing", "proclamation", "treaty",
        "alliance", "pact", "agreement", "resolution", "legislation", "law", "amendment", "bill",
        "referendum", "plebiscite", "mandate", "mandates", "mandated", "mandating",
        "sovereignty", "jurisdiction", "citizenship", "immigration", "borders", "annexation",
        "secession", "independence", "unification", "dissolution", "federation",
        "confederation", "colony", "colonialism", "decolonization", "imperialism",
        "nationalism", "socialism", "communism", "capitalism", "liberalism", "conservatism",
        "fascism", "anarchism", "populism", "authoritarianism", "totalitarianism", "democracy",
        "oligarchy", "aristocracy", "bureaucracy", "reform", "reforms", "reformed", "reforming",
        "revolution", "coup", "uprising", "rebellion", "protest", "protests", "protested",
        "protesting", "demonstration", "civil unrest", "civil rights", "human rights",
        "advocacy", "activism", "campaign", "campaigns", "campaigned", "campaigning",
        "corruption", "scandal", "censorship", "propaganda", "sanction", "sanctions",
        "sanctioned", "sanctioning", "embargo", "embargoes", "embargoed", "embargoing",
        "diplomacy", "negotiation", "veto", "vetoes", "vetoed", "vetoing", "executive order",
        "policy", "governance", "regulation", "oversight", "transparency", "election",
        "inauguration", "impeachment", "succession", "taxation", "budget", "budgets",
        "budgeted", "budgeting", "welfare", "public service", "statecraft", "geopolitics",
    ],
    "Science": [
        "experiment", "experiments", "experimented", "experimenting", "discovery",
        "hypothesis", "theory", "law", "observation", "measurement", "analysis", "calculation",
        "classification", "modeling", "simulation", "prediction", "research", "researches",
        "researched", "researching", "publication", "peer review", "dataset", "laboratory",
        "fieldwork", "specimen", "sample", "microscope", "telescope", "particle", "atom",
        "molecule", "DNA", "RNA", "genome", "cell", "organism", "species", "evolution",
        "adaptation", "biodiversity", "ecology", "climate", "climate change", "atmosphere",
        "geology", "tectonics", "volcano", "earthquake", "magnetism", "radiation", "energy",
        "quantum", "relativity", "thermodynamics", "gravity", "motion", "wave", "optics",
        "astronomy", "supernova", "nebula", "galaxy", "black hole", "comet", "asteroid",
        "meteor", "chemistry", "reaction", "compound", "solution", "physics", "electronics",
        "kinetics", "biology", "anatomy", "physiology", "botany", "zoology", "microbiology",
        "genetics", "biotechnology", "medicine", "vaccine", "drug", "diagnosis", "treatment",
        "pathology", "epidemiology", "statistics", "mathematics", "algebra", "calculus",
        "geometry", "number theory", "robotics", "nanotechnology", "materials science",
        "engineering", "computing", "algorithms", "data science", "conservation",
        "renewable energy", "planetary science", "space exploration", "biophysics",
        "astrobiology", "astronaut", "astronauts", "cosmonaut", "cosmonauts", "lunar",
        "moon landing",
    ],
    "Economics": [
        "economy", "economic policy", "recession", "depression", "inflation", "hyperinflation",
        "deflation", "stagflation", "unemployment", "labor", "wages", "minimum wage",
        "living wage", "capital", "investment", "trade", "trades", "traded", "trading",
        "exports", "imports", "tariffs", "subsidies", "market", "supply", "demand", "price",
        "competition", "monopoly", "oligopoly", "free market", "capitalism", "social market",
        "privatization", "nationalization", "finance", "banking", "interest rates", "credit",
        "debt", "bond", "stock market", "crash", "boom", "GDP", "industrialization",
        "globalization", "consumerism", "commerce", "entrepreneurship", "corporation",
        "business", "profit", "loss", "bankruptcy", "inflation rate", "exchange rate",
        "currency", "trade route", "merchants", "economist", "economic growth",
        "fiscal policy", "monetary policy", "central bank", "Wall Street", "commercial trade",
        "economic sanctions", "import restrictions", "export controls", "taxation",
        "budget deficit", "surplus", "economic collapse", "economic recovery",
    ],
    "Military": [
        "war", "battle", "battles", "battled", "battling", "conflict", "campaign", "campaigns",
        "campaigned", "campaigning", "operation", "mission", "assault", "assaults", "assaulted",
        "assaulting", "offensive", "defensive", "raid", "raids", "raided", "raiding", "siege",
        "ambush", "ambushes", "ambushed", "ambushing", "skirmish", "skirmishes", "skirmished",
        "skirmishing", "invasion", "occupation", "liberation", "retreat", "retreats",
        "retreated", "retreating", "surrender", "surrenders", "surrendered", "surrendering",
        "armistice", "ceasefire", "truce", "peace treaty", "strategy", "tactics", "maneuver",
        "formation", "mobilization", "conscription", "enlistment", "deployment", "logistics",
        "supply lines", "fortifications", "trenches", "bunkers", "naval fleet", "army",
        "infantry", "cavalry", "artillery", "armored division", "marines", "navy",
        "air force", "special forces", "paratroopers", "commandos", "guerrilla", "insurgency",
        "counterinsurgency", "militia", "mercenary", "general", "commander", "colonel",
        "captain", "lieutenant", "sergeant", "soldier", "veteran", "intelligence",
        "reconnaissance", "espionage", "sabotage", "sabotages", "sabotaged", "sabotaging",
        "codebreaking", "encryption", "radar", "sonar", "missile", "rocket", "bomb", "bombs",
        "bombed", "bombing", "ammunition", "firearm", "rifle", "pistol", "tank", "drone",
        "helicopter", "aircraft", "jet", "fighter", "submarine", "battleship", "carrier",
        "chemical weapons", "biological weapons", "nuclear weapons", "wartime production",
        "demilitarization", "war crimes", "tribunal", "occupation forces",
    ],
    "People": [
        "birth", "death", "burial", "coronation", "inauguration", "marriage", "divorce",
        "ascension", "abdication", "exile", "pilgrimage", "biography", "legacy", "influence",
        "childhood", "adulthood", "career", "retirement", "achievements", "accomplishments",
        "discoveries", "creations", "awards", "honors", "recognition", "leadership",
        "presidency", "kingship", "rulership", "command", "activism", "advocacy", "protest",
        "protests", "protested", "protesting", "speech", "philosophy", "teachings", "writings",
        "publication", "invention", "exploration", "voyage", "expedition", "migration",
        "settlement", "education", "mentorship", "training", "apprenticeship", "scandal",
        "downfall", "assassination", "illness", "recovery", "humanitarian work", "charity",
        "scholarship", "debate", "debates", "debated", "debating", "collaboration", "rivalry",
        "partnership", "inspiration", "innovation", "resistance", "reform", "reforms",
        "reformed", "reforming", "creativity", "authorship", "performance", "composition",
        "breakthrough", "public service",
    ],
    "Technology": [
        "invention", "innovation", "breakthrough", "prototype", "patent", "blueprint",
        "architecture", "system", "hardware", "software", "firmware", "algorithm", "code",
        "programming", "computing", "processors", "chip", "microchip", "semiconductor",
        "transistor", "circuit", "motherboard", "memory", "storage", "database", "networking",
        "ethernet", "wireless", "radio", "telecommunications", "satellite", "fiber optics",
        "robotics", "automation", "AI", "machine learning", "deep learning", "neural networks",
        "blockchain", "cybersecurity", "encryption", "cryptography", "quantum computing",
        "virtual reality", "augmented reality", "sensors", "IoT", "drone",
        "industrial machinery", "engines", "turbines", "generators", "battery", "electricity",
        "power grid", "solar panels", "renewable energy", "nuclear energy",
        "automotive technology", "transportation", "railway", "aviation", "aerospace",
        "spacecraft", "spaceflight", "space shuttle", "space station", "rocket", "lander",
        "rover", "telescope", "medical devices", "MRI", "X-ray", "surgical robots",
        "bioengineering", "nanotechnology", "manufacturing", "3D printing", "fabrication",
        "design", "designs", "designed", "designing", "engineering", "user interface",
        "operating system", "mobile device", "smartphone", "computer", "console", "internet",
        "web", "cloud computing", "deployment", "release", "releases", "released", "releasing",
        "upgrade", "upgrades", "upgraded", "upgrading", "versioning", "maintenance",
    ],
}
# fmt: on


def _compile_matchers(keywords: list[str]) -> tuple[list[str], re.Pattern[str] | None]:
    """Split keywords into phrases (substring match) and one whole-word pattern."""
    phrases: list[str] = []
    words: list[str] = []
    for keyword in keywords:
        normalized = normalize_text(keyword)
        if not normalized:
            continue
        if " " in normalized:
            phrases.append(normalized)
        else:
            words.append(re.escape(normalized))

    pattern = None
    if words:
        pattern = re.compile(r"\b(?:" + "|".join(dict.fromkeys(words)) + r")\b", re.IGNORECASE)
    return phrases, pattern


# Built once at import; read-only afterwards
_CATEGORY_MATCHERS: dict[str, tuple[list[str], re.Pattern[str] | None]] = {
    category: _compile_matchers(keywords) for category, keywords in CATEGORY_KEYWORDS.items()
}

ALL_CATEGORIES: tuple[str, ...] = (DEFAULT_CATEGORY, *CATEGORY_KEYWORDS)


def categorize(title: str, description: str) -> list[str]:
    """Infer category tags for an event from its title and description.

    Multi-word keywords match as substrings of the normalized text, single
    words only as whole words, so "art" never matches inside "started".

    Returns:
        Matching category names in table order, or ["General"] when nothing matches.
    """
    text = normalize_text(f"{title} {description}")
    matched = []

    for category, (phrases, pattern) in _CATEGORY_MATCHERS.items():
        if any(phrase in text for phrase in phrases) or (pattern and pattern.search(text)):
            matched.append(category)

    return matched or [DEFAULT_CATEGORY]
