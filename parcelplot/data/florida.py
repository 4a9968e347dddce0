"""
Static Florida reference data: county centres, map zoom levels and approximate
bounding boxes, plus the Tallahassee principal meridian initial point that anchors the
PLSS township grid. Bounding boxes are coarse (lat/lng rectangles) and overlap along
county lines.
"""
from typing import Dict, NamedTuple, Tuple

LatLng = Tuple[float, float]


class County(NamedTuple):
    name: str
    center: LatLng
    zoom: int
    bounds: Tuple[LatLng, LatLng]   # (southwest, northeast)


# Tallahassee meridian / base line initial point (30°26'03"N, 84°16'38"W)
INITIAL_POINT: LatLng = (30.43417, -84.27722)

FLORIDA_CENTER: LatLng = (27.6648, -81.5158)
FLORIDA_ZOOM = 7

COUNTIES: Tuple[County, ...] = (
    County("Alachua", (29.7938, -82.4944), 10, ((29.5367, -82.6225), (29.9047, -82.0524))),
    County("Baker", (30.3293, -82.3018), 10, ((30.2073, -82.4995), (30.5632, -82.0330))),
    County("Bay", (30.2690, -85.6251), 10, ((30.0405, -85.9133), (30.4428, -85.2947))),
    County("Bradford", (29.9724, -82.1697), 10, ((29.7851, -82.3587), (30.1142, -82.0057))),
    County("Brevard", (28.2639, -80.7214), 9, ((27.8150, -80.8208), (28.8742, -80.4820))),
    County("Broward", (26.1901, -80.3659), 10, ((25.9656, -80.8827), (26.4512, -80.0708))),
    County("Calhoun", (30.4033, -85.1894), 10, ((30.2153, -85.4168), (30.6094, -84.9819))),
    County("Charlotte", (26.9661, -82.0784), 10, ((26.6930, -82.3154), (27.1076, -81.6813))),
    County("Citrus", (28.8849, -82.5186), 10, ((28.6904, -82.7269), (29.1219, -82.3464))),
    County("Clay", (29.9944, -81.7787), 10, ((29.8680, -82.0998), (30.2155, -81.6394))),
    County("Collier", (26.1124, -81.4051), 9, ((25.7485, -82.1822), (26.4521, -80.9924))),
    County("Columbia", (30.2233, -82.6179), 10, ((29.8928, -82.8481), (30.4296, -82.4574))),
    County("DeSoto", (27.1888, -81.8273), 10, ((27.0424, -82.0360), (27.3859, -81.5740))),
    County("Dixie", (29.6000, -83.1568), 10, ((29.3912, -83.5807), (29.7321, -82.9317))),
    County("Duval", (30.3501, -81.6035), 10, ((30.0597, -82.0469), (30.5717, -81.3966))),
    County("Escambia", (30.6389, -87.3414), 10, ((30.2767, -87.6210), (30.7223, -86.9284))),
    County("Flagler", (29.4086, -81.2519), 10, ((29.3100, -81.4177), (29.7173, -81.0821))),
    County("Franklin", (29.8336, -84.8568), 10, ((29.5988, -85.2095), (29.9560, -84.6408))),
    County("Gadsden", (30.5563, -84.6479), 10, ((30.3402, -84.8970), (30.7091, -84.4820))),
    County("Gilchrist", (29.7219, -82.7973), 10, ((29.5584, -82.9356), (29.8613, -82.6217))),
    County("Glades", (26.9847, -81.1859), 10, ((26.6811, -81.3755), (27.1550, -80.8181))),
    County("Gulf", (29.9324, -85.2427), 10, ((29.6354, -85.5784), (30.0603, -85.0675))),
    County("Hamilton", (30.4913, -82.9479), 10, ((30.3544, -83.2805), (30.7948, -82.7881))),
    County("Hardee", (27.4502, -81.8224), 10, ((27.2776, -82.0086), (27.6273, -81.5277))),
    County("Hendry", (26.5537, -81.3765), 10, ((26.2488, -81.4597), (26.8722, -80.7714))),
    County("Hernando", (28.5579, -82.4753), 10, ((28.2919, -82.6756), (28.7382, -82.3027))),
    County("Highlands", (27.3400, -81.3400), 10, ((27.1264, -81.8147), (27.6384, -81.1324))),
    County("Hillsborough", (27.9904, -82.3018), 10, ((27.6418, -82.8529), (28.1823, -82.0423))),
    County("Holmes", (30.8741, -85.8077), 10, ((30.6720, -85.9877), (31.0067, -85.6340))),
    County("Indian River", (27.6948, -80.5438), 10, ((27.6016, -80.7657), (28.1430, -80.3110))),
    County("Jackson", (30.7151, -85.2128), 10, ((30.5264, -85.3992), (31.0037, -84.9257))),
    County("Jefferson", (30.4312, -83.8897), 10, ((30.2378, -83.9975), (30.6173, -83.6944))),
    County("Lafayette", (30.0241, -83.2013), 10, ((29.8997, -83.3909), (30.1973, -83.0951))),
    County("Lake", (28.7028, -81.7787), 10, ((28.3231, -81.9791), (29.0041, -81.4602))),
    County("Lee", (26.5537, -81.8273), 10, ((26.3364, -82.2625), (26.7987, -81.6725))),
    County("Leon", (30.4906, -84.1857), 10, ((30.2587, -84.6094), (30.6482, -84.0323))),
    County("Levy", (29.3179, -82.7973), 10, ((29.0505, -83.5614), (29.6138, -82.5850))),
    County("Liberty", (30.2339, -84.8824), 10, ((30.0378, -85.2667), (30.4139, -84.7607))),
    County("Madison", (30.4680, -83.4701), 10, ((30.1926, -83.7290), (30.6178, -83.2801))),
    County("Manatee", (27.4799, -82.3452), 10, ((27.3478, -82.8082), (27.7311, -82.2488))),
    County("Marion", (29.2788, -82.1278), 10, ((28.9618, -82.4576), (29.5218, -81.9294))),
    County("Martin", (27.0805, -80.4104), 10, ((27.0027, -80.6608), (27.2664, -80.0716))),
    County("Miami-Dade", (25.5516, -80.6327), 9, ((25.2045, -80.8535), (25.9344, -80.1392))),
    County("Monroe", (24.5557, -81.7826), 9, ((24.3963, -82.3018), (25.3730, -80.8772))),
    County("Nassau", (30.6190, -81.7659), 10, ((30.5131, -82.0258), (30.7937, -81.4153))),
    County("Okaloosa", (30.5773, -86.6611), 10, ((30.2377, -86.9297), (30.9952, -86.1717))),
    County("Okeechobee", (27.3462, -80.8987), 10, ((27.0611, -80.9961), (27.4831, -80.5674))),
    County("Orange", (28.4845, -81.2518), 10, ((28.2800, -81.6557), (28.8068, -80.9411))),
    County("Osceola", (28.0619, -81.0818), 10, ((27.9040, -81.6877), (28.6014, -80.6550))),
    County("Palm Beach", (26.6515, -80.2767), 9, ((26.3572, -80.8849), (27.0274, -80.0350))),
    County("Pasco", (28.3232, -82.4319), 10, ((28.1027, -82.8488), (28.4573, -82.0914))),
    County("Pinellas", (27.8764, -82.7779), 10, ((27.6296, -82.8398), (28.1742, -82.3777))),
    County("Polk", (27.9661, -81.6900), 10, ((27.5912, -82.0313), (28.2834, -81.1269))),
    County("Putnam", (29.6265, -81.7787), 10, ((29.3292, -82.0532), (29.8309, -81.4717))),
    County("Santa Rosa", (30.7690, -86.9824), 10, ((30.3745, -87.3007), (30.9965, -86.6643))),
    County("Sarasota", (27.1900, -82.3452), 10, ((27.0649, -82.7564), (27.3858, -82.1561))),
    County("Seminole", (28.7132, -81.2078), 10, ((28.6196, -81.4138), (28.8774, -81.0705))),
    County("St. Johns", (29.9719, -81.4279), 10, ((29.6587, -81.6902), (30.2169, -81.1652))),
    County("St. Lucie", (27.3724, -80.4420), 10, ((27.1885, -80.5687), (27.5585, -80.2011))),
    County("Sumter", (28.7132, -82.0784), 10, ((28.5527, -82.2637), (29.0237, -81.8082))),
    County("Suwannee", (30.1926, -82.9979), 10, ((30.0455, -83.1763), (30.5404, -82.7583))),
    County("Taylor", (30.0993, -83.6774), 10, ((29.7329, -83.8844), (30.1677, -83.4494))),
    County("Union", (30.0354, -82.3690), 10, ((29.8831, -82.5144), (30.1600, -82.2320))),
    County("Volusia", (29.0280, -81.0755), 10, ((28.6741, -81.4715), (29.3988, -80.8031))),
    County("Wakulla", (30.0993, -84.3866), 10, ((30.0347, -84.7611), (30.3547, -84.1554))),
    County("Walton", (30.5644, -86.1893), 10, ((30.2061, -86.4094), (30.7956, -85.8574))),
    County("Washington", (30.5773, -85.6613), 10, ((30.3713, -85.8627), (30.8500, -85.4954))),
)


def county_key(name: str) -> str:
    return name.strip().lower().replace(".", "").replace("-", "").replace(" ", "")


COUNTIES_BY_KEY: Dict[str, County] = {county_key(c.name): c for c in COUNTIES}
