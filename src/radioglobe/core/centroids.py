from __future__ import annotations

# ISO 3166-1 alpha-2 code -> approximate geographic centre (lat, lng).
COUNTRY_CENTROIDS: dict[str, tuple[float, float]] = {
    "US": (39.8283, -98.5795),
    "GB": (54.7024, -3.2766),
    "DE": (51.1657, 10.4515),
    "FR": (46.6034, 1.8883),
    "IT": (41.9028, 12.4964),
    "ES": (40.4637, -3.7492),
    "CA": (56.1304, -106.3468),
    "AU": (-25.2744, 133.7751),
    "JP": (36.2048, 138.2529),
    "BR": (-14.235, -51.9253),
    "RU": (61.524, 105.3188),
    "CN": (35.8617, 104.1954),
    "IN": (20.5937, 78.9629),
    "MX": (23.6345, -102.5528),
    "AR": (-38.4161, -63.6167),
    "ZA": (-30.5595, 22.9375),
    "KR": (35.9078, 127.7669),
    "NL": (52.1326, 5.2913),
    "SE": (60.1282, 18.6435),
    "NO": (60.472, 8.4689),
    "DK": (56.2639, 9.5018),
    "FI": (61.9241, 25.7482),
    "PL": (51.9194, 19.1451),
    "CZ": (49.8175, 15.473),
    "AT": (47.5162, 14.5501),
    "CH": (46.8182, 8.2275),
    "BE": (50.5039, 4.4699),
    "PT": (39.3999, -8.2245),
    "GR": (39.0742, 21.8243),
    "TR": (38.9637, 35.2433),
    "EG": (26.0963, 29.9876),
    "TH": (15.87, 100.9925),
    "MY": (4.2105, 101.9758),
    "ID": (-0.7893, 113.9213),
    "PH": (12.8797, 121.774),
    "VN": (14.0583, 108.2772),
    "PK": (30.3753, 69.3451),
    "BD": (23.685, 90.3563),
    "NG": (9.082, 8.6753),
    "KE": (-0.0236, 37.9062),
    "GH": (7.9465, -1.0232),
    "TN": (33.8869, 9.5375),
    "MA": (31.7917, -7.0926),
    "DZ": (28.0339, 1.6596),
    "LY": (26.3351, 17.2283),
    "SD": (12.8628, 30.2176),
    "ET": (9.145, 38.7379),
    "UG": (1.3733, 32.2903),
    "TZ": (-6.369, 34.8888),
    "ZW": (-19.0154, 29.1549),
    "ZM": (-13.1339, 27.8493),
    "BW": (-22.3285, 24.6849),
    "NA": (-22.9576, 18.4904),
    "AO": (-11.2027, 17.8739),
    "MZ": (-18.6657, 35.5296),
    "MG": (-18.7669, 46.8691),
    "CM": (7.3697, 12.3547),
    "CI": (7.5399, -5.5471),
    "SN": (14.4974, -14.4524),
    "ML": (17.5707, -3.9962),
    "BF": (12.2383, -1.5616),
    "NE": (17.6078, 8.0817),
    "TD": (15.4542, 18.7322),
    "CF": (6.6111, 20.9394),
    "SS": (6.877, 31.307),
    "ER": (15.1794, 39.7823),
    "DJ": (11.8251, 42.5903),
    "SO": (5.1521, 46.1996),
    "YE": (15.5527, 48.5164),
    "OM": (21.4735, 55.9754),
    "SA": (23.8859, 45.0792),
    "IQ": (33.2232, 43.6793),
    "SY": (34.8021, 38.9968),
    "LB": (33.8547, 35.8623),
    "JO": (30.5852, 36.2384),
    "IL": (31.0461, 34.8516),
    "PS": (31.9522, 35.2332),
    "KW": (29.3117, 47.4818),
    "BH": (25.9304, 50.6378),
    "QA": (25.3548, 51.1839),
    "AE": (23.4241, 53.8478),
    "IR": (32.4279, 53.688),
    "AF": (33.9391, 67.71),
    "TM": (38.9697, 59.5563),
    "UZ": (41.3775, 64.5853),
    "KZ": (48.0196, 66.9237),
    "KG": (41.2044, 74.7661),
    "TJ": (38.861, 71.2761),
    "MN": (46.8625, 103.8467),
    "NP": (28.3949, 84.124),
    "BT": (27.5142, 90.4336),
    "LK": (7.8731, 80.7718),
    "MM": (21.9162, 95.956),
    "KH": (12.5657, 104.991),
    "LA": (19.8563, 102.4955),
    "TL": (-8.8742, 125.7275),
    "PG": (-6.3149, 143.9555),
    "SB": (-9.6457, 160.1562),
    "VU": (-15.3767, 166.9592),
    "FJ": (-17.7134, 178.065),
    "TO": (-21.1789, -175.1982),
    "WS": (-13.759, -172.1046),
    "KI": (-3.3704, -168.734),
    "MH": (7.1315, 171.1845),
    "PW": (7.5149, 134.5825),
    "FM": (7.4256, 150.5508),
    "NR": (-0.5228, 166.9315),
    "TV": (-7.1095, 177.6493),
    "CK": (-21.2367, -159.7777),
    "NU": (-19.0544, -169.8672),
    "AS": (-14.27, -170.1322),
    "GU": (13.4443, 144.7937),
    "MP": (17.3308, 145.3847),
    "PR": (18.2208, -66.5901),
    "VI": (18.3358, -64.8963),
    "KY": (19.5135, -80.566),
    "BM": (32.3214, -64.7574),
    "GL": (71.7069, -42.6043),
    "FO": (61.8926, -6.9118),
    "IS": (64.9631, -19.0208),
    "AX": (60.1785, 19.9156),
    "SJ": (77.5536, 23.6703),
    "IE": (53.4129, -8.2439),
    "NZ": (-40.9006, 174.886),
    "CL": (-35.6751, -71.543),
    "CO": (4.5709, -74.2973),
    "PE": (-9.19, -75.0152),
    "VE": (6.4238, -66.5897),
    "EC": (-1.8312, -78.1834),
    "UY": (-32.5228, -55.7658),
    "PY": (-23.4425, -58.4438),
    "BO": (-16.2902, -63.5887),
    "CU": (21.5218, -77.7812),
    "DO": (18.7357, -70.1627),
    "JM": (18.1096, -77.2975),
    "HT": (18.9712, -72.2852),
    "GT": (15.7835, -90.2308),
    "HN": (15.2, -86.2419),
    "SV": (13.7942, -88.8965),
    "NI": (12.8654, -85.2072),
    "CR": (9.7489, -83.7534),
    "PA": (8.538, -80.7821),
    "BS": (25.0343, -77.3963),
    "TT": (10.6918, -61.2225),
    "BB": (13.1939, -59.5432),
    "UA": (48.3794, 31.1656),
    "BY": (53.7098, 27.9534),
    "MD": (47.4116, 28.3699),
    "RO": (45.9432, 24.9668),
    "HU": (47.1625, 19.5033),
    "SK": (48.669, 19.699),
    "SI": (46.1512, 14.9955),
    "HR": (45.1, 15.2),
    "RS": (44.0165, 21.0059),
    "BA": (43.9159, 17.6791),
    "ME": (42.7087, 19.3744),
    "XK": (42.6026, 20.903),
    "AL": (41.1533, 20.1683),
    "MK": (41.6086, 21.7453),
    "BG": (42.7339, 25.4858),
    "LT": (55.1694, 23.8813),
    "LV": (56.8796, 24.6032),
    "EE": (58.5953, 25.0136),
    "LU": (49.8153, 6.1296),
    "MT": (35.9375, 14.3754),
    "CY": (35.1264, 33.4299),
    "AD": (42.5462, 1.6016),
    "MC": (43.7503, 7.4128),
    "LI": (47.166, 9.5554),
    "SM": (43.9424, 12.4578),
    "VA": (41.9029, 12.4534),
    "GE": (42.3154, 43.3569),
    "AM": (40.0691, 45.0382),
    "AZ": (40.1431, 47.5769),
    "SG": (1.3521, 103.8198),
    "TW": (23.6978, 120.9605),
    "HK": (22.3964, 114.1095),
    "BN": (4.5353, 114.7277),
    "MV": (3.2028, 73.2207),
    "RW": (-1.9403, 29.8739),
    "CD": (-4.0383, 21.7587),
    "CG": (-0.228, 15.8277),
    "GA": (-0.8037, 11.6094),
    "LR": (6.4281, -9.4295),
    "SL": (8.4606, -11.7799),
    "GN": (9.9456, -9.6966),
    "MW": (-13.2543, 34.3015),
    "MU": (-20.3484, 57.5522),
    "CV": (16.0021, -24.0132),
    "RE": (-21.1151, 55.5364),
    "NC": (-20.9043, 165.618),
    "PF": (-17.6797, -149.4068),
}
