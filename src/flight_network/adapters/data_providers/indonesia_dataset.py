"""
Indonesian domestic flight network.

Reference airports, nine carriers with their average cruise speeds, and
the airport pairs each carrier flies. Pairs are undirected.
"""

from typing import Dict, List, Tuple

# (code, name, latitude, longitude)
AIRPORTS: List[Tuple[str, str, float, float]] = [
    ("AAP", "APT Pranoto (Samarinda)", 0.3785, 117.5680),
    ("AMQ", "Pattimura (Ambon)", -3.7103, 128.0895),
    ("ARD", "Mali Airport (Alor)", -8.1323, 124.5970),
    ("BDJ", "Syamsudin Noor (Banjarmasin)", -3.4422, 114.7606),
    ("BDO", "Husein Sastranegara (Bandung)", -6.9006, 107.5750),
    ("BEJ", "Kalimarau (Berau)", 2.1555, 117.4336),
    ("BIK", "Frans Kaisiepo (Biak)", -1.1900, 136.1080),
    ("BJW", "Soa Airport (Bajawa)", -8.7075, 120.9953),
    ("BMU", "Sultan Muhammad Salahuddin (Bima)", -8.5406, 118.6866),
    ("BPN", "SAMS Sepinggan (Balikpapan)", -1.2681, 116.8947),
    ("BKS", "Fatmawati Soekarno (Bengkulu)", -3.8637, 102.3400),
    ("BTH", "Hang Nadim (Batam)", 1.1204, 104.1197),
    ("BTJ", "Sultan Iskandar Muda (Banda Aceh)", 5.5235, 95.4203),
    ("BWX", "Banyuwangi", -8.3100, 114.3400),
    ("CGK", "Soekarno-Hatta (Jakarta)", -6.1256, 106.6559),
    ("DJB", "Sultan Thaha (Jambi)", -1.6380, 103.6440),
    ("DJJ", "Sentani (Jayapura)", -2.5760, 140.5160),
    ("DOB", "Dobo Airport (Kepulauan Aru)", -5.7722, 134.2100),
    ("DPS", "Ngurah Rai (Denpasar)", -8.7482, 115.1670),
    ("DTB", "Sisingamangaraja XII (Silangit)", 2.2594, 98.9919),
    ("ENE", "Haji Hasan Aroeboesman (Ende)", -8.8493, 121.6600),
    ("FKQ", "Fakfak Airport", -2.9200, 132.2670),
    ("GNS", "Binaka (Gunung Sitoli)", 1.1664, 97.7046),
    ("GTO", "Djalaluddin (Gorontalo)", 0.6371, 122.8520),
    ("HLP", "Halim Perdanakusuma (Jakarta)", -6.2666, 106.8900),
    ("JOG", "Adisutjipto (Yogyakarta)", -7.7882, 110.4310),
    ("KBU", "Stagen Airport (Kotabaru)", -3.2947, 116.1650),
    ("KDI", "Haluoleo (Kendari)", -4.0816, 122.4180),
    ("KJT", "Kertajati (Majalengka)", -6.6556, 108.1670),
    ("KNG", "Kaimana Airport", -3.6445, 133.6959),
    ("KNO", "Kualanamu (Medan)", 3.6423, 98.8853),
    ("KOE", "El Tari (Kupang)", -10.1716, 123.6710),
    ("LLJ", "Silampari (Lubuk Linggau)", -3.2861, 102.9160),
    ("LOP", "Zainuddin Abdul Madjid (Lombok)", -8.7573, 116.2767),
    ("LUV", "Karel Sadsuitubun (Langgur)", -5.6616, 132.7318),
    ("LBJ", "Komodo (Labuan Bajo)", -8.4867, 119.8890),
    ("LUW", "Syukuran Aminuddin Amir (Luwuk)", -0.9185, 122.7860),
    ("MDC", "Sam Ratulangi (Manado)", 1.5494, 124.9250),
    ("MKQ", "Mopah (Merauke)", -8.5203, 140.4170),
    ("MKW", "Rendani (Manokwari)", -0.8918, 134.0490),
    ("MLG", "Abdul Rahman Saleh (Malang)", -7.9266, 112.7140),
    ("MOF", "Fransiskus Xaverius Seda (Maumere)", -8.6406, 122.2370),
    ("MOH", "Maleo (Morowali)", -2.2250, 121.4060),
    ("NBX", "Douw Aturure (Nabire)", -3.3682, 135.4960),
    ("NTX", "Ranai Airport (Natuna)", 3.9087, 108.3880),
    ("OKL", "Oksibil Airport", -4.9069, 140.6270),
    ("PDG", "Minangkabau (Padang)", -0.7869, 100.2800),
    ("PGK", "Depati Amir (Pangkal Pinang)", -2.1622, 106.1390),
    ("PKN", "Iskandar (Pangkalan Bun)", -2.7050, 111.6730),
    ("PKU", "Sultan Syarif Kasim II (Pekanbaru)", 0.4608, 101.4450),
    ("PKY", "Tjilik Riwut (Palangkaraya)", -2.2235, 113.9430),
    ("PLM", "Sultan Mahmud Badaruddin II (Palembang)", -2.8983, 104.6990),
    ("PLW", "Mutiara SIS Al-Jufri (Palu)", -0.9180, 119.9100),
    ("PNK", "Supadio (Pontianak)", -0.1507, 109.4030),
    ("RTG", "Frans Sales Lega (Ruteng)", -8.5960, 120.4770),
    ("SMQ", "H. Asan (Sampit)", -2.5001, 112.9750),
    ("SOC", "Adi Soemarmo (Solo)", -7.5161, 110.7570),
    ("SOQ", "Domine Eduard Osok (Sorong)", -0.9250, 131.1210),
    ("SRG", "Ahmad Yani (Semarang)", -6.9714, 110.3740),
    ("SUB", "Juanda (Surabaya)", -7.3796, 112.7870),
    ("SXK", "Saumlaki Airport", -7.9886, 131.3053),
    ("TJQ", "H.A.S. Hanandjoeddin (Tanjung Pandan)", -2.7456, 107.7540),
    ("TKG", "Raden Inten II (Lampung)", -5.2423, 105.1780),
    ("TMC", "Lede Kalumbang (Tambolaka)", -9.4097, 119.2440),
    ("TIM", "Moses Kilangin (Timika)", -4.5283, 136.8870),
    ("TNJ", "Raja Haji Fisabilillah (Tanjung Pinang)", 0.9220, 104.5320),
    ("TRK", "Juwata (Tarakan)", 3.3253, 117.5690),
    ("TTE", "Sultan Babullah (Ternate)", 0.8314, 127.3810),
    ("UPG", "Sultan Hasanuddin (Makassar)", -5.0616, 119.5540),
    ("WGP", "Mau Hau Airport (Waingapu)", -9.6692, 120.3020),
    ("WMX", "Wamena", -4.1025, 138.9570),
    ("YIA", "New Yogyakarta Int'l (Kulon Progo)", -7.9056, 110.0560),
]

# airline key -> (display name, cruise speed in km/h)
AIRLINES: Dict[str, Tuple[str, float]] = {
    "garuda": ("Garuda Indonesia", 966.18),
    "lion": ("Lion Air", 873.75),
    "airasia": ("Indonesia Airasia", 1008.75),
    "wings": ("Wings Abadi Airlines", 505.0),
    "trigana": ("Trigana Air Service", 733.46),
    "sriwijaya": ("Sriwijaya Air", 764.0),
    "batik": ("Batik Air", 930.43),
    "nam": ("NAM Air", 675.0),
    "citilink": ("Citilink Indonesia", 871.88),
}

ROUTES_BY_AIRLINE: Dict[str, List[Tuple[str, str]]] = {
    "garuda": [
        ("ARD", "KOE"), ("AMQ", "SUB"), ("BPN", "SUB"), ("BPN", "YIA"), ("BTJ", "KNO"),
        ("BIK", "DJJ"), ("BIK", "UPG"), ("DPS", "KOE"), ("DPS", "UPG"), ("DPS", "LOP"),
        ("DPS", "SUB"), ("DPS", "TIM"), ("DPS", "YIA"), ("GTO", "UPG"), ("CGK", "BPN"),
        ("CGK", "BDJ"), ("CGK", "BTH"), ("CGK", "DPS"), ("CGK", "DJB"), ("CGK", "UPG"),
        ("CGK", "MLG"), ("CGK", "MDC"), ("CGK", "LOP"), ("CGK", "KNO"), ("CGK", "PDG"),
        ("CGK", "PKY"), ("CGK", "PLM"), ("CGK", "PGK"), ("CGK", "PKU"), ("CGK", "PNK"),
        ("CGK", "SRG"), ("CGK", "SOC"), ("CGK", "SUB"), ("CGK", "TKG"), ("CGK", "YIA"),
        ("DJJ", "UPG"), ("DJJ", "TIM"), ("KDI", "UPG"), ("UPG", "BPN"), ("UPG", "MDC"),
        ("UPG", "PLW"), ("UPG", "SUB"), ("UPG", "TTE"), ("MDC", "TTE"),
    ],
    "lion": [
        ("AMQ", "UPG"), ("BPN", "UPG"), ("BPN", "SUB"), ("BPN", "TRK"), ("BPN", "YIA"),
        ("BTJ", "KNO"), ("BDJ", "SUB"), ("BDJ", "YIA"), ("BTH", "KNO"), ("BTH", "PKU"),
        ("BTH", "SUB"), ("DPS", "UPG"), ("DPS", "YIA"), ("GTO", "UPG"), ("CGK", "AMQ"),
        ("CGK", "BPN"), ("CGK", "BTJ"), ("CGK", "BDJ"), ("CGK", "BTH"), ("CGK", "BKS"),
        ("CGK", "DPS"), ("CGK", "DJB"), ("CGK", "KDI"), ("CGK", "UPG"), ("CGK", "MDC"),
        ("CGK", "LOP"), ("CGK", "KNO"), ("CGK", "PDG"), ("CGK", "PKY"), ("CGK", "PLM"),
        ("CGK", "PLW"), ("CGK", "PGK"), ("CGK", "PKU"), ("CGK", "PNK"), ("CGK", "SRG"),
        ("CGK", "SOC"), ("CGK", "SUB"), ("CGK", "YIA"), ("DJJ", "UPG"), ("KDI", "UPG"),
        ("KOE", "SUB"), ("UPG", "MDC"), ("UPG", "PLW"), ("UPG", "SUB"), ("UPG", "TTE"),
        ("MDC", "SUB"), ("LOP", "SUB"), ("PKY", "SUB"),
    ],
    "airasia": [
        ("BDO", "DPS"), ("BDO", "PKU"), ("BDO", "SUB"), ("CGK", "DPS"), ("CGK", "SUB"),
        ("CGK", "YIA"), ("KNO", "PLM"), ("KNO", "YIA"),
    ],
    "wings": [
        ("ARD", "KOE"), ("AMQ", "DOB"), ("AMQ", "FKQ"), ("AMQ", "KNG"), ("AMQ", "LUV"),
        ("AMQ", "MKW"), ("AMQ", "SXK"), ("AMQ", "SOQ"), ("BJW", "KOE"), ("BJW", "LBJ"),
        ("BPN", "BDJ"), ("BPN", "BEJ"), ("BPN", "PLW"), ("BTJ", "KNO"), ("TKG", "BDO"),
        ("BDO", "SRG"), ("BDO", "SOC"), ("BDO", "YIA"), ("BDJ", "KBU"), ("BTH", "BKS"),
        ("BTH", "NTX"), ("BTH", "PGK"), ("BTH", "DTB"), ("BMU", "DPS"), ("BMU", "LOP"),
    ],
    "trigana": [
        ("AMQ", "LUV"), ("DOB", "LUV"), ("CGK", "PKN"), ("DJJ", "NBX"), ("DJJ", "OKL"),
        ("DJJ", "WMX"), ("PKN", "SRG"), ("PKN", "SUB"),
    ],
    "sriwijaya": [
        ("AMQ", "TTE"), ("BPN", "BDJ"), ("BPN", "BEJ"), ("BPN", "UPG"), ("BPN", "PLW"),
        ("BPN", "SUB"), ("BPN", "TRK"), ("BPN", "YIA"), ("TKG", "BTH"), ("BDJ", "UPG"),
        ("BTH", "NTX"), ("BEJ", "SUB"), ("BIK", "DJJ"), ("BIK", "UPG"), ("DPS", "UPG"),
        ("GTO", "UPG"), ("CGK", "BPN"), ("CGK", "TKG"), ("CGK", "BTH"), ("CGK", "DPS"),
        ("CGK", "UPG"), ("CGK", "MLG"), ("CGK", "KNO"), ("CGK", "PDG"), ("CGK", "PGK"),
        ("CGK", "PNK"), ("CGK", "SRG"), ("CGK", "DTB"), ("CGK", "SOC"), ("CGK", "SUB"),
        ("CGK", "TJQ"), ("CGK", "TTE"), ("CGK", "YIA"), ("DJJ", "UPG"), ("DJJ", "MKW"),
        ("DJJ", "MKQ"), ("DJJ", "TIM"), ("KDI", "UPG"), ("KOE", "SUB"), ("LUW", "UPG"),
        ("UPG", "MKW"), ("UPG", "MKQ"), ("UPG", "SOQ"), ("UPG", "SUB"), ("UPG", "TTE"),
        ("UPG", "TIM"), ("MDC", "TTE"), ("MKW", "SOQ"), ("KNO", "PDG"), ("SRG", "SUB"),
        ("SUB", "TTE"), ("SUB", "YIA"),
    ],
    "batik": [
        ("AMQ", "UPG"), ("AMQ", "SUB"), ("BPN", "TRK"), ("BTJ", "KNO"), ("GTO", "UPG"),
        ("CGK", "AMQ"), ("CGK", "BPN"), ("CGK", "BTH"), ("CGK", "DJJ"), ("CGK", "KDI"),
        ("CGK", "KOE"), ("CGK", "LOP"), ("CGK", "UPG"), ("CGK", "MDC"), ("CGK", "KNO"),
        ("CGK", "PDG"), ("CGK", "PLM"), ("CGK", "PKU"), ("CGK", "SRG"), ("CGK", "SUB"),
        ("CGK", "YIA"), ("KDI", "UPG"), ("UPG", "DJJ"), ("UPG", "PLW"), ("UPG", "SUB"),
        ("UPG", "TTE"),
    ],
    "nam": [
        ("ARD", "KOE"), ("BJW", "KOE"), ("BDO", "SUB"), ("BTH", "DJB"), ("BTH", "KNO"),
        ("DPS", "LBJ"), ("DPS", "MOF"), ("DPS", "WGP"), ("DPS", "YIA"), ("ENE", "KOE"),
        ("CGK", "TKG"), ("CGK", "BKS"), ("CGK", "DJB"), ("CGK", "PLM"), ("CGK", "PGK"),
        ("CGK", "SRG"), ("CGK", "SOC"), ("CGK", "SOQ"), ("CGK", "TJQ"), ("CGK", "TNJ"),
        ("DJJ", "SOQ"), ("KOE", "MOF"), ("KOE", "RTG"), ("KOE", "WGP"), ("KNO", "PKU"),
        ("PLM", "PGK"), ("PLM", "YIA"), ("PGK", "TJQ"), ("PNK", "YIA"), ("SOQ", "TIM"),
    ],
    "citilink": [
        ("BPN", "DPS"), ("BPN", "UPG"), ("BPN", "SUB"), ("BPN", "YIA"), ("BTJ", "KNO"),
        ("BDO", "BTH"), ("BDO", "DPS"), ("BDO", "KNO"), ("BDO", "PLM"), ("BDO", "PKU"),
        ("BDO", "SUB"), ("BDJ", "SUB"), ("BTH", "KNO"), ("BTH", "PDG"), ("BTH", "PLM"),
        ("BTH", "PKU"), ("BTH", "SUB"), ("DPS", "SUB"), ("CGK", "BPN"), ("CGK", "BDJ"),
        ("CGK", "BTH"), ("CGK", "BKS"), ("CGK", "DPS"), ("CGK", "DJB"), ("CGK", "LOP"),
        ("CGK", "UPG"), ("CGK", "MDC"), ("CGK", "KNO"), ("CGK", "PDG"), ("CGK", "PGK"),
        ("CGK", "PKU"), ("CGK", "PNK"), ("CGK", "SRG"), ("CGK", "SUB"), ("CGK", "TJQ"),
        ("CGK", "YIA"), ("KOE", "SUB"), ("LOP", "SUB"), ("UPG", "MDC"), ("UPG", "SUB"),
        ("MDC", "SUB"), ("KNO", "PKU"), ("PKY", "SUB"), ("PLM", "SUB"), ("PKU", "SUB"),
        ("PKU", "YIA"), ("PNK", "SUB"),
    ],
}
