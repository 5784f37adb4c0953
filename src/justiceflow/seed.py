"""Example dataset written on first use of an empty store.

Blobs are kept in the persisted (camelCase) layout so they go through the
same parsing path as data read back from storage.
"""

SEED_STATIONS = [
    {"id": "POL-001", "name": "Mount Lavinia HQ", "location": "Mount Lavinia", "contact": "0112717501"},
    {"id": "POL-002", "name": "Dehiwala Station", "location": "Dehiwala", "contact": "0112717502"},
]

SEED_HOSPITALS = [
    {"id": "HOS-001", "name": "Colombo South Teaching Hospital", "location": "Kalubowila", "contact": "0112763000"},
    {"id": "HOS-002", "name": "National Hospital", "location": "Colombo 10", "contact": "0112691111"},
]

SEED_COURTS = [
    {"id": "CRT-001", "name": "Mount Lavinia Magistrate Court", "location": "Mount Lavinia", "contact": "0112717341"},
    {"id": "CRT-002", "name": "Gangodawila Magistrate Court", "location": "Nugegoda", "contact": "0112852555"},
]

SEED_ACCOUNTS = [
    {
        "id": "USR-001", "name": "System Admin", "email": "admin@justiceflow.gov.lk",
        "nic": "198012345678", "role": "admin", "contact": "0110000000",
        "appointedPlace": "Head Office", "status": "Active", "password": "admin",
    },
    {
        "id": "USR-002", "name": "OIC Perera", "email": "police@justiceflow.gov.lk",
        "nic": "198512345678", "role": "police", "contact": "0711111111",
        "appointedPlace": "Mount Lavinia HQ", "status": "Active", "password": "123",
    },
    {
        "id": "USR-003", "name": "Dr. Silva", "email": "jmo@justiceflow.gov.lk",
        "nic": "197812345678", "role": "jmo", "contact": "0772222222",
        "appointedPlace": "National Hospital", "status": "Active", "password": "123",
    },
    {
        "id": "USR-004", "name": "Hon. Magistrate", "email": "judge@justiceflow.gov.lk",
        "nic": "197012345678", "role": "judge", "contact": "0713333333",
        "appointedPlace": "Mount Lavinia Magistrate Court", "status": "Active", "password": "123",
    },
    {
        "id": "USR-005", "name": "Counsel Dias", "email": "attorney@justiceflow.gov.lk",
        "nic": "198812345678", "role": "attorney", "contact": "0774444444",
        "appointedPlace": "Bar Association / Private", "status": "Active", "password": "123",
    },
]

SEED_CASES = [
    {
        "id": "CASE-2023-001",
        "date": "2023-10-24",
        "venue": "Borella",
        "desc": "Traffic accident involving two motorcycles at Borella Junction.",
        "status": "Pending",
        "assignedCourt": "Mount Lavinia Magistrate Court",
        "station": "Mount Lavinia HQ",
        "officer": "OIC Perera",
        "reporterRole": "Victim",
        "victimName": "Saman Perera",
        "jmoRequired": True,
        "evidence": [],
        "parties": [
            {
                "partyId": "seed-0001-0",
                "name": "Saman Perera",
                "nic": "198512345670",
                "role": "Victim",
                "statement": "Hit from behind while waiting at the signal.",
                "isHospitalized": True,
                "hospitalName": "National Hospital",
                "medicalReport": None,
            },
            {
                "partyId": "seed-0001-1",
                "name": "Nimal Silva",
                "nic": "199012345670",
                "role": "Suspect",
                "statement": "",
                "isHospitalized": False,
                "hospitalName": None,
                "medicalReport": None,
            },
        ],
        "courtHistory": [],
    },
    {
        "id": "CASE-2023-002",
        "date": "2023-10-25",
        "venue": "Pettah",
        "desc": "Physical altercation at public market.",
        "status": "Under Investigation",
        "assignedCourt": "Gangodawila Magistrate Court",
        "station": "Dehiwala Station",
        "officer": "IP Fernando",
        "reporterRole": "Witness",
        "victimName": "Kamal Gunaratne",
        "jmoRequired": True,
        "evidence": [],
        "parties": [
            {
                "partyId": "seed-0002-0",
                "name": "Kamal Gunaratne",
                "nic": "197812345670",
                "role": "Victim",
                "statement": "",
                "isHospitalized": True,
                "hospitalName": "Colombo South Teaching Hospital",
                "medicalReport": None,
            },
        ],
        "courtHistory": [],
    },
    {
        "id": "CASE-2023-005",
        "date": "2023-10-26",
        "venue": "Maradana",
        "desc": "Pedestrian hit by three-wheeler.",
        "status": "Pending",
        "assignedCourt": "Mount Lavinia Magistrate Court",
        "station": "Mount Lavinia HQ",
        "officer": "OIC Perera",
        "reporterRole": "Witness",
        "victimName": "Sunil Bandara",
        "jmoRequired": True,
        "evidence": [],
        "parties": [
            {
                "partyId": "seed-0005-0",
                "name": "Sunil Bandara",
                "nic": "196512345670",
                "role": "Victim",
                "statement": "",
                "isHospitalized": True,
                "hospitalName": "National Hospital",
                "medicalReport": None,
            },
        ],
        "courtHistory": [],
    },
]

__all__ = [
    "SEED_STATIONS",
    "SEED_HOSPITALS",
    "SEED_COURTS",
    "SEED_ACCOUNTS",
    "SEED_CASES",
]
