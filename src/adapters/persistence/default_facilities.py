from __future__ import annotations

from src.domain.models import Facility, GeoPoint


def _f(
    name: str,
    category: str,
    area: str,
    lat: float,
    lng: float,
    aliases: tuple[str, ...],
    popularity: int,
) -> Facility:
    return Facility(
        name=name,
        category=category,
        area=area,
        position=GeoPoint(lat=lat, lng=lng),
        aliases=aliases,
        popularity=popularity,
    )


# Kolkata hospitals and clinics, used whenever facilities.json is unavailable.
DEFAULT_FACILITIES: tuple[Facility, ...] = (
    _f("SSKM Hospital (IPGMER)", "Government Hospital", "Alipore/Bhawanipore", 22.5380, 88.3538, ("SSKM", "IPGMER", "PG"), 10),
    _f("NRS Medical College & Hospital", "Government Hospital", "Sealdah", 22.5643, 88.3680, ("NRS",), 9),
    _f("R. G. Kar Medical College & Hospital", "Government Hospital", "Belgharia/Shyambazar", 22.6018, 88.3928, ("RG Kar", "RGKAR"), 8),
    _f("Calcutta National Medical College & Hospital", "Government Hospital", "Park Circus", 22.5586, 88.3737, ("CNMC",), 7),
    _f("M. R. Bangur Hospital", "Government Hospital", "Tollygunge/Jadavpur", 22.4970, 88.3620, ("MR Bangur",), 6),
    _f("AMRI Hospital Dhakuria", "Private Hospital", "Dhakuria", 22.5039, 88.3753, ("AMRI Dhakuria",), 8),
    _f("AMRI Hospital Salt Lake", "Private Hospital", "Salt Lake", 22.5875, 88.4210, ("AMRI Salt Lake",), 7),
    _f("AMRI Hospital Mukundapur", "Private Hospital", "Mukundapur", 22.4930, 88.4060, ("AMRI Mukundapur",), 6),
    _f("Fortis Hospital Anandapur", "Private Hospital", "Anandapur", 22.5204, 88.4191, ("Fortis Anandapur",), 9),
    _f("Medica Superspecialty Hospital", "Private Hospital", "Mukundapur", 22.4955, 88.4014, ("Medica",), 9),
    _f("Apollo Gleneagles Multispeciality Hospital", "Private Hospital", "EM Bypass/Phoolbagan", 22.5721, 88.4105, ("Apollo Gleneagles", "Apollo"), 9),
    _f("Ruby General Hospital", "Private Hospital", "Kasba/EM Bypass", 22.5032, 88.3979, ("Ruby",), 8),
    _f("Desun Hospital", "Private Hospital", "EM Bypass", 22.5035, 88.3697, ("Desun",), 7),
    _f("Peerless Hospital", "Private Hospital", "Naktala/E M Bypass", 22.4847, 88.3899, ("Peerless",), 6),
    _f("Woodlands Multispeciality Hospital", "Private Hospital", "Alipore/Mominpur", 22.5177, 88.3413, ("Woodlands",), 7),
    _f("CMRI (Calcutta Medical Research Institute)", "Private Hospital", "Alipore", 22.5197, 88.3454, ("CMRI",), 7),
    _f("Belle Vue Clinic", "Private Hospital", "Rawdon Street", 22.5472, 88.3564, ("Bellevue",), 7),
    _f("Kothari Medical Centre", "Private Hospital", "Alipore", 22.5180, 88.3518, ("Kothari",), 6),
    _f("Bhagirathi Neotia Woman & Child Care Centre", "Maternity", "Rawdon Street", 22.5630, 88.3503, ("Neotia",), 6),
    _f("Institute of Neurosciences Kolkata (INK)", "Speciality", "Park Circus", 22.5529, 88.3660, ("INK",), 6),
    _f("Charnock Hospital", "Private Hospital", "Jessore Road", 22.6369, 88.4387, ("Charnock",), 5),
    _f("Manipal Hospitals Salt Lake (ex Columbia Asia)", "Private Hospital", "Salt Lake", 22.5906, 88.4147, ("Manipal", "Columbia Asia"), 6),
    _f("Tata Medical Center", "Cancer Centre", "New Town", 22.5599, 88.4883, ("TMC",), 8),
    _f("R N Tagore International Institute of Cardiac Sciences", "Cardiac", "Mukundapur", 22.4982, 88.4098, ("RN Tagore", "Narayana"), 8),
    _f("KPC Medical College & Hospital", "Teaching Hospital", "Jadavpur", 22.4940, 88.3770, ("KPC",), 6),
    _f("Ramakrishna Mission Seva Pratishthan (Sishumangal)", "Maternity", "Kalighat", 22.5163, 88.3451, ("RKMSP", "Sishumangal"), 6),
    _f("Ekbalpur Nursing Home", "Nursing Home", "Ekbalpur", 22.5220, 88.3410, ("Ekbalpur",), 5),
    _f("GD Hospital & Diabetes Institute", "Speciality", "Park Street", 22.5550, 88.3500, ("GD Hospital",), 5),
    _f("Susrut Eye Foundation & Research", "Eye", "Salt Lake", 22.6010, 88.4190, ("Susrut",), 5),
    _f("B. P. Poddar Hospital & Medical Research Ltd.", "Private Hospital", "New Alipore", 22.5775, 88.3615, ("BP Poddar",), 5),
    _f("Howrah General Hospital", "Government Hospital", "Howrah", 22.5890, 88.3210, ("Howrah Hospital",), 4),
    _f("Narayana Superspeciality Hospital, Howrah", "Private Hospital", "Howrah", 22.5950, 88.3220, ("Narayana Howrah",), 5),
    _f("Apollo Clinic Salt Lake", "Clinic", "Salt Lake", 22.5860, 88.4170, ("Apollo Clinic",), 4),
    _f("Apollo Clinic New Town", "Clinic", "New Town", 22.5750, 88.4670, ("Apollo Clinic",), 4),
    _f("Calcutta Heart Clinic & Research Institute", "Cardiac", "Salt Lake", 22.4890, 88.3860, ("Calcutta Heart",), 5),
    _f("Park Clinic", "Nursing Home", "Bhawanipore", 22.5385, 88.3537, ("Park Clinic",), 4),
    _f("Nightingale Hospital", "Nursing Home", "Elgin", 22.5462, 88.3555, ("Nightingale",), 4),
)
