from __future__ import annotations

from typing import Dict, Tuple

# Abbreviation -> (offset, long name). Several abbreviations share an offset;
# the first one listed for an offset is the one reported as its short name.
TIME_ZONES: Dict[str, Tuple[str, str]] = {
    "ACDT": ("UTC+10:30", "Australian Central Daylight Saving Time"),
    "ACST": ("UTC+09:30", "Australian Central Standard Time"),
    "ACT": ("UTC-05:00", "Acre Time"),
    "ACT-ASEAN": ("UTC+08:00", "ASEAN Common Time"),
    "ACWST": ("UTC+08:45", "Australian Central Western Standard Time (Unofficial)"),
    "ADT": ("UTC-03:00", "Atlantic Daylight Time"),
    "AEDT": ("UTC+11:00", "Australian Eastern Daylight Saving Time"),
    "AEST": ("UTC+10:00", "Australian Eastern Standard Time"),
    "AET": ("UTC+10:00", "Australian Eastern Time"),
    "AFT": ("UTC+04:30", "Afghanistan Time"),
    "AKDT": ("UTC-08:00", "Alaska Daylight Time"),
    "AKST": ("UTC-09:00", "Alaska Standard Time"),
    "ALMT": ("UTC+06:00", "Alma-Ata Time"),
    "AMST": ("UTC-03:00", "Amazon Summer Time (Brazil)"),
    "AMT-Brazil": ("UTC-04:00", "Amazon Time (Brazil)"),
    "AMT-Armenia": ("UTC+04:00", "Armenia Time"),
    "ANAT": ("UTC+12:00", "Anadyr Time"),
    "AQTT": ("UTC+05:00", "Aqtobe Time"),
    "ART": ("UTC-03:00", "Argentina Time"),
    "AST": ("UTC+03:00", "Arabia Standard Time"),
    "AST-Atlantic": ("UTC-04:00", "Atlantic Standard Time"),
    "AWST": ("UTC+08:00", "Australian Western Standard Time"),
    "AZOST": ("UTC+00:00", "Azores Summer Time"),
    "AZOT": ("UTC-01:00", "Azores Standard Time"),
    "AZT": ("UTC+04:00", "Azerbaijan Time"),
    "BNT": ("UTC+08:00", "Brunei Time"),
    "BIOT": ("UTC+06:00", "British Indian Ocean Time"),
    "BIT": ("UTC-12:00", "Baker Island Time"),
    "BOT": ("UTC-04:00", "Bolivia Time"),
    "BRST": ("UTC-02:00", "Brasília Summer Time"),
    "BRT": ("UTC-03:00", "Brasília Time"),
    "BDT": ("UTC+06:00", "Bangladesh Standard Time"),
    "BST-BD": ("UTC+06:00", "Bangladesh Standard Time"),
    "BST-Bougainville": ("UTC+11:00", "Bougainville Standard Time"),
    "BST-British": ("UTC+01:00", "British Summer Time"),
    "BTT": ("UTC+06:00", "Bhutan Time"),
    "CAT": ("UTC+02:00", "Central Africa Time"),
    "CCT": ("UTC+06:30", "Cocos Islands Time"),
    "CDT-NA": ("UTC-05:00", "Central Daylight Time (North America)"),
    "CDT-Cuba": ("UTC-04:00", "Cuba Daylight Time"),
    "CEST": ("UTC+02:00", "Central European Summer Time"),
    "CET": ("UTC+01:00", "Central European Time"),
    "CHADT": ("UTC+13:45", "Chatham Daylight Time"),
    "CHAST": ("UTC+12:45", "Chatham Standard Time"),
    "CHOT": ("UTC+08:00", "Choibalsan Standard Time"),
    "CHOST": ("UTC+09:00", "Choibalsan Summer Time"),
    "CHST": ("UTC+10:00", "Chamorro Standard Time"),
    "CHUT": ("UTC+10:00", "Chuuk Time"),
    "CIST": ("UTC-08:00", "Clipperton Island Standard Time"),
    "CKT": ("UTC-10:00", "Cook Island Time"),
    "CLST": ("UTC-03:00", "Chile Summer Time"),
    "CLT": ("UTC-04:00", "Chile Standard Time"),
    "COST": ("UTC-04:00", "Colombia Summer Time"),
    "COT": ("UTC-05:00", "Colombia Time"),
    "CST-CA": ("UTC-06:00", "Central Standard Time (Central America)"),
    "CST-China": ("UTC+08:00", "China Standard Time"),
    "CST-Cuba": ("UTC-05:00", "Cuba Standard Time"),
    "CT": ("UTC-06:00", "Central Time"),
    "CVT": ("UTC-01:00", "Cape Verde Time"),
    "CWST": ("UTC+08:45", "Central Western Standard Time (Australia)"),
    "CXT": ("UTC+07:00", "Christmas Island Time"),
    "DAVT": ("UTC+07:00", "Davis Time"),
    "DDUT": ("UTC+10:00", "Dumont d'Urville Time (Antarctic Station in French)"),
    "DFT": ("UTC+01:00", "AIX-specific equivalent of Central European Time"),
    "EASST": ("UTC-05:00", "Easter Island Summer Time"),
    "EAST": ("UTC-06:00", "Easter Island Standard Time"),
    "EAT": ("UTC+03:00", "East Africa Time"),
    "ECT-Caribbean": ("UTC-04:00", "Eastern Caribbean Time"),
    "ECT-Ecuador": ("UTC-05:00", "Ecuador Time"),
    "EDT": ("UTC-04:00", "Eastern Daylight Time (North America)"),
    "EEST": ("UTC+03:00", "Eastern European Summer Time"),
    "EET": ("UTC+02:00", "Eastern European Time"),
    "EGST": ("UTC+00:00", "Eastern Greenland Summer Time"),
    "EGT": ("UTC-01:00", "Eastern Greenland Time"),
    "EST": ("UTC-05:00", "Eastern Standard Time (North America)"),
    "ET": ("UTC-05:00", "Eastern Time (North America)"),
    "FET": ("UTC+03:00", "Further-eastern European Time"),
    "FJT": ("UTC+12:00", "Fiji Time"),
    "FKST": ("UTC-03:00", "Falkland Islands Summer Time"),
    "FKT": ("UTC-04:00", "Falkland Islands Time"),
    "FNT": ("UTC-02:00", "Fernando de Noronha Time"),
    "GALT": ("UTC-06:00", "Galápagos Time"),
    "GAMT": ("UTC-09:00", "Gambier Islands Time"),
    "GET": ("UTC+04:00", "Georgia Standard Time"),
    "GFT": ("UTC-03:00", "French Guiana Time"),
    "GILT": ("UTC+12:00", "Gilbert Island Time"),
    "GIT": ("UTC-09:00", "Gambier Island Time"),
    "GMT": ("UTC+00:00", "Greenwich Mean Time"),
    "GST-Georgia": ("UTC-02:00", "South Georgia and the South Sandwich Islands Time"),
    "GST-Gulf": ("UTC+04:00", "Gulf Standard Time"),
    "GYT": ("UTC-04:00", "Guyana Time"),
    "HDT": ("UTC-09:00", "Hawaii–Aleutian Daylight Time"),
    "HAEC": ("UTC+02:00", "Heure Avancée d'Europe Centrale (French for CEST)"),
    "HST": ("UTC-10:00", "Hawaii–Aleutian Standard Time"),
    "HKT": ("UTC+08:00", "Hong Kong Time"),
    "HMT": ("UTC+05:00", "Heard and McDonald Islands Time"),
    "HOVST": ("UTC+08:00", "Hovd Summer Time"),
    "HOVT": ("UTC+07:00", "Hovd Time"),
    "ICT": ("UTC+07:00", "Indochina Time"),
    "IDLW": ("UTC-12:00", "International Date Line West"),
    "IDT": ("UTC+03:00", "Israel Daylight Time"),
    "IOT": ("UTC+06:00", "Indian Ocean Time"),
    "IRDT": ("UTC+04:30", "Iran Daylight Time"),
    "IRKT": ("UTC+08:00", "Irkutsk Time"),
    "IRST": ("UTC+03:30", "Iran Standard Time"),
    "IST-India": ("UTC+05:30", "Indian Standard Time"),
    "IST-Ireland": ("UTC+01:00", "Irish Standard Time"),
    "IST-Israel": ("UTC+02:00", "Israel Standard Time"),
    "JST": ("UTC+09:00", "Japan Standard Time"),
    "KALT": ("UTC+02:00", "Kaliningrad Time"),
    "KGT": ("UTC+06:00", "Kyrgyzstan Time"),
    "KOST": ("UTC+11:00", "Kosrae Time"),
    "KRAT": ("UTC+07:00", "Krasnoyarsk Time"),
    "KST": ("UTC+09:00", "Korea Standard Time"),
    "LHST-Standard": ("UTC+10:30", "Lord Howe Standard Time"),
    "LHST-Summer": ("UTC+11:00", "Lord Howe Summer Time"),
    "LINT": ("UTC+14:00", "Line Islands Time"),
    "MAGT": ("UTC+12:00", "Magadan Time"),
    "MART": ("UTC-09:30", "Marquesas Islands Time"),
    "MAWT": ("UTC+05:00", "Mawson Station Time"),
    "MDT": ("UTC-06:00", "Mountain Daylight Time (North America)"),
    "MET": ("UTC+01:00", "Middle European Time"),
    "MEST": ("UTC+02:00", "Middle European Summer Time"),
    "MHT": ("UTC+12:00", "Marshall Islands Time"),
    "MIST": ("UTC+11:00", "Macquarie Island Station Time"),
    "MIT": ("UTC-09:30", "Marquesas Islands Time"),
    "MMT": ("UTC+06:30", "Myanmar Standard Time"),
    "MSK": ("UTC+03:00", "Moscow Time"),
    "MST-Malay": ("UTC+08:00", "Malaysian Standard Time"),
    "MST-NA": ("UTC-07:00", "Mountain Standard Time (North America)"),
    "MT": ("UTC-07:00", "Mountain Time (North America)"),
    "MUT": ("UTC+04:00", "Mauritius Time"),
    "MVT": ("UTC+05:00", "Maldives Time"),
    "MYT": ("UTC+08:00", "Malaysia Time"),
    "NCT": ("UTC+11:00", "New Caledonia Time"),
    "NDT": ("UTC-02:30", "Newfoundland Daylight Time"),
    "NFT": ("UTC+11:00", "Norfolk Island Time"),
    "NOVT": ("UTC+07:00", "Novosibirsk Time"),
    "NPT": ("UTC+05:45", "Nepal Time"),
    "NST": ("UTC-03:30", "Newfoundland Standard Time"),
    "NT": ("UTC-03:30", "Newfoundland Time"),
    "NUT": ("UTC-11:00", "Niue Time"),
    "NZDT": ("UTC+13:00", "New Zealand Daylight Time"),
    "NZDST": ("UTC+13:00", "New Zealand Daylight Saving Time"),
    "NZST": ("UTC+12:00", "New Zealand Standard Time"),
    "OMST": ("UTC+06:00", "Omsk Time"),
    "ORAT": ("UTC+05:00", "Oral Time"),
    "PDT": ("UTC-07:00", "Pacific Daylight Time (North America)"),
    "PET": ("UTC-05:00", "Peru Time"),
    "PETT": ("UTC+12:00", "Kamchatka Time"),
    "PGT": ("UTC+10:00", "Papua New Guinea Time"),
    "PHOT": ("UTC+13:00", "Phoenix Island Time"),
    "PHT": ("UTC+08:00", "Philippine Time"),
    "PHST": ("UTC+08:00", "Philippine Standard Time"),
    "PKT": ("UTC+05:00", "Pakistan Standard Time"),
    "PMDT": ("UTC-02:00", "Saint Pierre and Miquelon Daylight Time"),
    "PMST": ("UTC-03:00", "Saint Pierre and Miquelon Standard Time"),
    "PONT": ("UTC+11:00", "Pohnpei Standard Time"),
    "PST": ("UTC-08:00", "Pacific Standard Time (North America)"),
    "PT": ("UTC-08:00", "Pacific Time (North America)"),
    "PWT": ("UTC+09:00", "Palau Time"),
    "PYST": ("UTC-03:00", "Paraguay Summer Time"),
    "PYT": ("UTC-04:00", "Paraguay Time"),
    "RET": ("UTC+04:00", "Réunion Time"),
    "ROTT": ("UTC-03:00", "Rothera Research Station Time"),
    "SAKT": ("UTC+11:00", "Sakhalin Island Time"),
    "SAMT": ("UTC+04:00", "Samara Time"),
    "SAST": ("UTC+02:00", "South African Standard Time"),
    "SBT": ("UTC+11:00", "Solomon Islands Time"),
    "SCT": ("UTC+04:00", "Seychelles Time"),
    "SDT": ("UTC-10:00", "Samoa Daylight Time"),
    "SGT": ("UTC+08:00", "Singapore Time"),
    "SLST": ("UTC+05:30", "Sri Lanka Standard Time"),
    "SRET": ("UTC+11:00", "Srednekolymsk Time"),
    "SRT": ("UTC-03:00", "Suriname Time"),
    "SST": ("UTC-11:00", "Samoa Standard Time"),
    "SYOT": ("UTC+03:00", "Showa Station Time"),
    "TAHT": ("UTC-10:00", "Tahiti Time"),
    "THA": ("UTC+07:00", "Thailand Standard Time"),
    "TFT": ("UTC+05:00", "French Southern and Antarctic Time"),
    "TJT": ("UTC+05:00", "Tajikistan Time"),
    "TKT": ("UTC+13:00", "Tokelau Time"),
    "TLT": ("UTC+09:00", "Timor Leste Time"),
    "TMT": ("UTC+05:00", "Turkmenistan Time"),
    "TRT": ("UTC+03:00", "Turkey Time"),
    "TOT": ("UTC+13:00", "Tonga Time"),
    "TST": ("UTC+08:00", "Taiwan Standard Time"),
    "TVT": ("UTC+12:00", "Tuvalu Time"),
    "ULAST": ("UTC+09:00", "Ulaanbaatar Summer Time"),
    "ULAT": ("UTC+08:00", "Ulaanbaatar Standard Time"),
    "UTC": ("UTC+00:00", "Coordinated Universal Time"),
    "UYST": ("UTC-02:00", "Uruguay Summer Time"),
    "UYT": ("UTC-03:00", "Uruguay Standard Time"),
    "UZT": ("UTC+05:00", "Uzbekistan Time"),
    "VET": ("UTC-04:00", "Venezuelan Standard Time"),
    "VLAT": ("UTC+10:00", "Vladivostok Time"),
    "VOLT": ("UTC+03:00", "Volgograd Time"),
    "VOST": ("UTC+06:00", "Vostok Station Time"),
    "VUT": ("UTC+11:00", "Vanuatu Time"),
    "WAKT": ("UTC+12:00", "Wake Island Time"),
    "WAST": ("UTC+02:00", "West Africa Summer Time"),
    "WAT": ("UTC+01:00", "West Africa Time"),
    "WEST": ("UTC+01:00", "Western European Summer Time"),
    "WET": ("UTC+00:00", "Western European Time"),
    "WIB": ("UTC+07:00", "Western Indonesian Time"),
    "WIT": ("UTC+09:00", "Eastern Indonesian Time"),
    "WITA": ("UTC+08:00", "Central Indonesia Time"),
    "WGST": ("UTC-02:00", "West Greenland Summer Time"),
    "WGT": ("UTC-03:00", "West Greenland Time"),
    "WST": ("UTC+08:00", "Western Standard Time"),
    "YAKT": ("UTC+09:00", "Yakutsk Time"),
    "YEKT": ("UTC+05:00", "Yekaterinburg Time"),
}

TIME_ZONE_LABELS: Dict[str, str] = {
    "UTC-12:00": "Baker Island Time",
    "UTC-11:00": "Samoa Standard Time",
    "UTC-10:00": "Hawaii-Aleutian Standard Time",
    "UTC-09:30": "Marquesas Islands Time",
    "UTC-09:00": "Alaskan Standard Time",
    "UTC-08:00": "Pacific Standard Time",
    "UTC-07:00": "Mountain Standard Time",
    "UTC-06:00": "Central Standard Time",
    "UTC-05:00": "Eastern Standard Time",
    "UTC-04:30": "Venezuelan Standard Time (Historical)",
    "UTC-04:00": "Atlantic Standard Time",
    "UTC-03:30": "Newfoundland Standard Time",
    "UTC-03:00": "SA Eastern Standard Time",
    "UTC-02:30": "Mid-Atlantic Time (Fictional)",
    "UTC-02:00": "Mid-Atlantic Standard Time",
    "UTC-01:00": "Cape Verde Time",
    "UTC+00:00": "Greenwich Mean Time",
    "UTC+01:00": "Central European Standard Time",
    "UTC+01:30": "Central Africa Time (Unofficial)",
    "UTC+02:00": "Eastern European Standard Time",
    "UTC+03:00": "Arab Standard Time",
    "UTC+03:30": "Iran Standard Time",
    "UTC+04:00": "Gulf Standard Time",
    "UTC+04:30": "Afghanistan Time",
    "UTC+05:00": "Pakistan Standard Time",
    "UTC+05:30": "India Standard Time",
    "UTC+05:45": "Nepal Standard Time",
    "UTC+06:00": "Bangladesh Standard Time",
    "UTC+06:30": "Myanmar Standard Time",
    "UTC+07:00": "Indochina Standard Time",
    "UTC+07:30": "Western Indonesia Time (Unofficial)",
    "UTC+08:00": "China Standard Time",
    "UTC+08:30": "North Korea Standard Time",
    "UTC+08:45": "South-Western Australia Standard Time",
    "UTC+09:00": "Japan Standard Time",
    "UTC+09:30": "Central Australia Standard Time",
    "UTC+10:00": "Eastern Australia Standard Time",
    "UTC+10:30": "Lord Howe Standard Time",
    "UTC+11:00": "Central Pacific Standard Time",
    "UTC+12:00": "New Zealand Standard Time",
    "UTC+12:45": "Chatham Standard Time",
    "UTC+13:00": "Phoenix Island Time",
    "UTC+14:00": "Line Islands Time",
}
