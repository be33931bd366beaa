import pytest

from name_days.loader import load_calendar

# day of year in 2000 -> line
CZECH = {
    9: "Vladan | vladana",
    60: "Horymír",
    153: "Laura",
    176: "Jan | jana janovi",
    256: "Marie | marii maria",
}
HUNGARY = {
    9: "Marcell",
    153: "Tünde",
    256: "Mária",
}
POLAND = {
    8: "Seweryn Jan | seweryna jana",
    9: "Marcjan Julian | marcjana juliana",
    60: "Roman Hilary | romana",
    135: "Maja Bonifacy",
    153: "Jakub Konrad",
    176: "Jan Danuta",
    256: "Maria Gwidon | marii",
}


def make_dataset(entries, days=366):
    lines = [""] * days
    for yday, line in entries.items():
        lines[yday - 1] = line
    return "\n".join(lines) + "\n"


@pytest.fixture
def sources():
    return {
        "Czech Republic": make_dataset(CZECH),
        "Hungary": make_dataset(HUNGARY),
        "Poland": make_dataset(POLAND),
    }


@pytest.fixture
def calendar(sources):
    return load_calendar(sources)
