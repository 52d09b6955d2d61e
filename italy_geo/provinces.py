"""
Reference table of the Italian provinces.

One record per current province (107), grouped by region. Every record
carries its official two-letter code, the province name, the seat
(capoluogo) and the region, plus alternate spellings that should resolve
to the same province.

Notes on aliases:
  - Multi-seat provinces list each seat ("Barletta", "Andria", "Trani").
  - The Sardinian provinces abolished in 2016 (CI, VS, OT, OG) are kept as
    aliases of the province that absorbed them, so legacy lead data keeps
    resolving.
  - No alias may collide with a token of another province; build_registry()
    enforces that.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProvinceRecord:
    code: str                   # "MI"
    name: str                   # "Milano"
    seat: str                   # capoluogo, may equal name
    region: str                 # "Lombardia"
    aliases: tuple[str, ...] = ()

    def tokens(self) -> tuple[str, ...]:
        """Every surface form this province answers to (code first)."""
        return (self.code, self.name, self.seat, *self.aliases)


_records: list[ProvinceRecord] = []


def _add(code: str, name: str, seat: str, region: str, aliases: tuple[str, ...] = ()):
    _records.append(ProvinceRecord(code, name, seat, region, tuple(aliases)))


# ── Lombardia ─────────────────────────────────────────────────────────

_add("MI", "Milano", "Milano", "Lombardia")
_add("BG", "Bergamo", "Bergamo", "Lombardia")
_add("BS", "Brescia", "Brescia", "Lombardia")
_add("CO", "Como", "Como", "Lombardia")
_add("CR", "Cremona", "Cremona", "Lombardia")
_add("LC", "Lecco", "Lecco", "Lombardia")
_add("LO", "Lodi", "Lodi", "Lombardia")
_add("MN", "Mantova", "Mantova", "Lombardia")
_add("MB", "Monza e Brianza", "Monza", "Lombardia", ("Monza", "Brianza"))
_add("PV", "Pavia", "Pavia", "Lombardia")
_add("SO", "Sondrio", "Sondrio", "Lombardia")
_add("VA", "Varese", "Varese", "Lombardia")

# ── Lazio ─────────────────────────────────────────────────────────────

_add("RM", "Roma", "Roma", "Lazio", ("Roma Capitale",))
_add("FR", "Frosinone", "Frosinone", "Lazio")
_add("LT", "Latina", "Latina", "Lazio")
_add("RI", "Rieti", "Rieti", "Lazio")
_add("VT", "Viterbo", "Viterbo", "Lazio")

# ── Campania ──────────────────────────────────────────────────────────

_add("NA", "Napoli", "Napoli", "Campania")
_add("AV", "Avellino", "Avellino", "Campania")
_add("BN", "Benevento", "Benevento", "Campania")
_add("CE", "Caserta", "Caserta", "Campania")
_add("SA", "Salerno", "Salerno", "Campania")

# ── Sicilia ───────────────────────────────────────────────────────────

_add("PA", "Palermo", "Palermo", "Sicilia")
_add("AG", "Agrigento", "Agrigento", "Sicilia")
_add("CL", "Caltanissetta", "Caltanissetta", "Sicilia")
_add("CT", "Catania", "Catania", "Sicilia")
_add("EN", "Enna", "Enna", "Sicilia")
_add("ME", "Messina", "Messina", "Sicilia")
_add("RG", "Ragusa", "Ragusa", "Sicilia")
_add("SR", "Siracusa", "Siracusa", "Sicilia")
_add("TP", "Trapani", "Trapani", "Sicilia")

# ── Veneto ────────────────────────────────────────────────────────────

_add("VE", "Venezia", "Venezia", "Veneto")
_add("BL", "Belluno", "Belluno", "Veneto")
_add("PD", "Padova", "Padova", "Veneto")
_add("RO", "Rovigo", "Rovigo", "Veneto")
_add("TV", "Treviso", "Treviso", "Veneto")
_add("VR", "Verona", "Verona", "Veneto")
_add("VI", "Vicenza", "Vicenza", "Veneto")

# ── Piemonte ──────────────────────────────────────────────────────────

_add("TO", "Torino", "Torino", "Piemonte")
_add("AL", "Alessandria", "Alessandria", "Piemonte")
_add("AT", "Asti", "Asti", "Piemonte")
_add("BI", "Biella", "Biella", "Piemonte")
_add("CN", "Cuneo", "Cuneo", "Piemonte")
_add("NO", "Novara", "Novara", "Piemonte")
_add("VB", "Verbano-Cusio-Ossola", "Verbania", "Piemonte", ("Verbania", "VCO"))
_add("VC", "Vercelli", "Vercelli", "Piemonte")

# ── Emilia-Romagna ────────────────────────────────────────────────────

_add("BO", "Bologna", "Bologna", "Emilia-Romagna")
_add("FC", "Forlì-Cesena", "Forlì", "Emilia-Romagna", ("Forlì", "Cesena"))
_add("FE", "Ferrara", "Ferrara", "Emilia-Romagna")
_add("MO", "Modena", "Modena", "Emilia-Romagna")
_add("PR", "Parma", "Parma", "Emilia-Romagna")
_add("PC", "Piacenza", "Piacenza", "Emilia-Romagna")
_add("RA", "Ravenna", "Ravenna", "Emilia-Romagna")
_add("RE", "Reggio Emilia", "Reggio Emilia", "Emilia-Romagna", ("Reggio nell'Emilia",))
_add("RN", "Rimini", "Rimini", "Emilia-Romagna")

# ── Puglia ────────────────────────────────────────────────────────────

_add("BA", "Bari", "Bari", "Puglia")
_add("BT", "Barletta-Andria-Trani", "Barletta", "Puglia", ("Barletta", "Andria", "Trani", "BAT"))
_add("BR", "Brindisi", "Brindisi", "Puglia")
_add("FG", "Foggia", "Foggia", "Puglia")
_add("LE", "Lecce", "Lecce", "Puglia")
_add("TA", "Taranto", "Taranto", "Puglia")

# ── Calabria ──────────────────────────────────────────────────────────

_add("CZ", "Catanzaro", "Catanzaro", "Calabria")
_add("CS", "Cosenza", "Cosenza", "Calabria")
_add("KR", "Crotone", "Crotone", "Calabria")
_add("RC", "Reggio Calabria", "Reggio Calabria", "Calabria", ("Reggio di Calabria",))
_add("VV", "Vibo Valentia", "Vibo Valentia", "Calabria")

# ── Toscana ───────────────────────────────────────────────────────────

_add("FI", "Firenze", "Firenze", "Toscana")
_add("AR", "Arezzo", "Arezzo", "Toscana")
_add("GR", "Grosseto", "Grosseto", "Toscana")
_add("LI", "Livorno", "Livorno", "Toscana")
_add("LU", "Lucca", "Lucca", "Toscana")
_add("MS", "Massa-Carrara", "Massa", "Toscana", ("Massa", "Carrara"))
_add("PI", "Pisa", "Pisa", "Toscana")
_add("PT", "Pistoia", "Pistoia", "Toscana")
_add("PO", "Prato", "Prato", "Toscana")
_add("SI", "Siena", "Siena", "Toscana")

# ── Sardegna ──────────────────────────────────────────────────────────

_add("CA", "Cagliari", "Cagliari", "Sardegna")
_add("NU", "Nuoro", "Nuoro", "Sardegna", ("Ogliastra", "Tortolì", "Lanusei", "OG"))
_add("OR", "Oristano", "Oristano", "Sardegna")
_add("SS", "Sassari", "Sassari", "Sardegna",
     ("Olbia-Tempio", "Olbia", "Tempio", "Tempio Pausania", "Gallura", "OT"))
_add("SU", "Sud Sardegna", "Carbonia", "Sardegna",
     ("Carbonia-Iglesias", "Carbonia", "Iglesias", "Medio Campidano",
      "Villacidro", "Sanluri", "CI", "VS"))

# ── Liguria ───────────────────────────────────────────────────────────

_add("GE", "Genova", "Genova", "Liguria")
_add("IM", "Imperia", "Imperia", "Liguria")
_add("SP", "La Spezia", "La Spezia", "Liguria", ("Spezia",))
_add("SV", "Savona", "Savona", "Liguria")

# ── Marche ────────────────────────────────────────────────────────────

_add("AN", "Ancona", "Ancona", "Marche")
_add("AP", "Ascoli Piceno", "Ascoli Piceno", "Marche", ("Ascoli",))
_add("FM", "Fermo", "Fermo", "Marche")
_add("MC", "Macerata", "Macerata", "Marche")
_add("PU", "Pesaro e Urbino", "Pesaro", "Marche", ("Pesaro", "Urbino", "Pesaro-Urbino"))

# ── Abruzzo ───────────────────────────────────────────────────────────

_add("AQ", "L'Aquila", "L'Aquila", "Abruzzo", ("Aquila",))
_add("CH", "Chieti", "Chieti", "Abruzzo")
_add("PE", "Pescara", "Pescara", "Abruzzo")
_add("TE", "Teramo", "Teramo", "Abruzzo")

# ── Umbria ────────────────────────────────────────────────────────────

_add("PG", "Perugia", "Perugia", "Umbria")
_add("TR", "Terni", "Terni", "Umbria")

# ── Basilicata ────────────────────────────────────────────────────────

_add("PZ", "Potenza", "Potenza", "Basilicata")
_add("MT", "Matera", "Matera", "Basilicata")

# ── Molise ────────────────────────────────────────────────────────────

_add("CB", "Campobasso", "Campobasso", "Molise")
_add("IS", "Isernia", "Isernia", "Molise")

# ── Friuli-Venezia Giulia ─────────────────────────────────────────────

_add("TS", "Trieste", "Trieste", "Friuli-Venezia Giulia")
_add("GO", "Gorizia", "Gorizia", "Friuli-Venezia Giulia")
_add("PN", "Pordenone", "Pordenone", "Friuli-Venezia Giulia")
_add("UD", "Udine", "Udine", "Friuli-Venezia Giulia")

# ── Trentino-Alto Adige ───────────────────────────────────────────────

_add("TN", "Trento", "Trento", "Trentino-Alto Adige", ("Trient",))
_add("BZ", "Bolzano", "Bolzano", "Trentino-Alto Adige", ("Bozen", "Alto Adige", "Südtirol"))

# ── Valle d'Aosta ─────────────────────────────────────────────────────

_add("AO", "Valle d'Aosta", "Aosta", "Valle d'Aosta", ("Vallée d'Aoste",))


PROVINCE_RECORDS: tuple[ProvinceRecord, ...] = tuple(_records)
