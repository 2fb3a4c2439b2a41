"""Timestamps of successive lunar ascending nodes, starting in January 2010."""

from __future__ import annotations

from functools import lru_cache

from .ephemeris import MemorySource

EPOCH = 1263511068
"""First ascending node in the table: 2010-01-14T23:17:48+00:00."""

AVERAGE_PERIOD = 2351154
"""Average length of a draconic month in the table, in seconds."""

COUNT = 512

TIMESTAMPS: tuple[int, ...] = (
    1263511068, 1265864275, 1268208426, 1270547048, 1272890080, 1275242863, 1277601612, 1279958306,
    1282306351, 1284645402, 1286984117, 1289333657, 1291695271, 1294058848, 1296412143, 1298751531,
    1301087393, 1303434417, 1305795829, 1308162893, 1310524018, 1312871727, 1315208151, 1317546494,
    1319900364, 1322269366, 1324640232, 1326997685, 1329336954, 1331671282, 1334018953, 1336383848,
    1338755886, 1341121543, 1343471705, 1345808329, 1348145636, 1350498465, 1352867945, 1355241486,
    1357602645, 1359944081, 1362277743, 1364622904, 1366985230, 1369355984, 1371721871, 1374073153,
    1376410852, 1378747788, 1381097318, 1383461648, 1385830799, 1388190071, 1390532171, 1392866942,
    1395210697, 1397568243, 1399932401, 1402292205, 1404640298, 1406978798, 1409318116, 1411666912,
    1414025201, 1416385092, 1418736485, 1421076782, 1423415415, 1425762351, 1428117482, 1430473756,
    1432824073, 1435166680, 1437507108, 1439852774, 1442205528, 1444560850, 1446911680, 1449254096,
    1451593199, 1453939140, 1456294317, 1458651597, 1461002659, 1463344831, 1465683635, 1468028500,
    1470383406, 1472743679, 1475100374, 1477446333, 1479782979, 1482122829, 1484477169, 1486842536,
    1489205844, 1491556454, 1493894576, 1496231805, 1498580820, 1500943624, 1503311671, 1505672937,
    1508019067, 1510353619, 1512693539, 1515052135, 1517424359, 1519794240, 1522148234, 1524486029,
    1526822072, 1529171463, 1531536637, 1533908467, 1536273767, 1538622618, 1540957582, 1543295862,
    1545652472, 1548024519, 1550396539, 1552753397, 1555092535, 1557427823, 1559774803, 1562136840,
    1564506174, 1566870570, 1569220206, 1571556512, 1573894138, 1576246529, 1578612608, 1580979583,
    1583333997, 1585673551, 1588010113, 1590356095, 1592713464, 1595075608, 1597432994, 1599779146,
    1602117002, 1604457630, 1606808787, 1609167794, 1611524845, 1613871872, 1616211058, 1618552400,
    1620901812, 1623256926, 1625611264, 1627959187, 1630300446, 1632641603, 1634989714, 1637344765,
    1639699919, 1642047567, 1644387129, 1646727664, 1649077508, 1651434832, 1653791650, 1656141033,
    1658481694, 1660820306, 1663166947, 1665524963, 1667887672, 1670243899, 1672586713, 1674921895,
    1677265051, 1679623695, 1681990289, 1684352162, 1686701079, 1689038577, 1691376292, 1693727016,
    1696092550, 1698462870, 1700823766, 1703166884, 1705500264, 1707843735, 1710206244, 1712578756,
    1714946067, 1717297697, 1719635148, 1721971975, 1724322416, 1726689121, 1729062372, 1731427144,
    1733773017, 1736106362, 1738447494, 1740807538, 1743179321, 1745547775, 1747901160, 1750239636,
    1752576071, 1754923957, 1757286502, 1759655990, 1762019062, 1764365586, 1766700205, 1769040182,
    1771395561, 1773760991, 1776123797, 1778474209, 1780813136, 1783151434, 1785498823, 1787856363,
    1790217571, 1792572733, 1794916086, 1797253376, 1799596663, 1801950234, 1804308036, 1806661011,
    1809005059, 1811344844, 1813688703, 1816040005, 1818395371, 1820748337, 1823093895, 1825433626,
    1827776235, 1830127840, 1832484680, 1834837849, 1837181911, 1839520524, 1841863522, 1844216312,
    1846575289, 1848932388, 1851280728, 1853619690, 1855958092, 1858307634, 1860669653, 1863033669,
    1865387231, 1867726779, 1870062627, 1872409340, 1874770478, 1877137740, 1879499544, 1881847922,
    1884184412, 1886522288, 1888875870, 1891245060, 1893616342, 1895974205, 1898313804, 1900648150,
    1902995303, 1905359558, 1907731470, 1910097717, 1912448715, 1914785599, 1917122410, 1919474674,
    1921844003, 1924217705, 1926579148, 1928920907, 1931254676, 1933599382, 1935960924, 1938331209,
    1940697323, 1943049272, 1945387307, 1947723894, 1950072858, 1952436845, 1954805854, 1957165092,
    1959507333, 1961842292, 1964185861, 1966542823, 1968906452, 1971266186, 1973614598, 1975953322,
    1978292495, 1980640996, 1982999034, 1985358660, 1987709788, 1990050077, 1992388963, 1994736008,
    1997090943, 1999446955, 2001797180, 2004139836, 2006480302, 2008825995, 2011178839, 2013534232,
    2015884925, 2018227052, 2020566100, 2022912322, 2025267792, 2027625229, 2029976418, 2032318683,
    2034657387, 2037002043, 2039356981, 2041717654, 2044074836, 2046420959, 2048757398, 2051097107,
    2053451586, 2055817203, 2058180825, 2060531877, 2062870331, 2065207360, 2067555828, 2069918421,
    2072286901, 2074648936, 2076995553, 2079330015, 2081669628, 2084028051, 2086400258, 2088770343,
    2091124863, 2093463170, 2095799051, 2098147663, 2100512244, 2102884207, 2105250221, 2107599715,
    2109934715, 2112272625, 2114628843, 2117000580, 2119372499, 2121729669, 2124069320, 2126404609,
    2128750894, 2131112162, 2133481267, 2135846036, 2138196166, 2140532556, 2142869924, 2145221975,
    2147587639, 2149954238, 2152308631, 2154648530, 2156985232, 2159330842, 2161687643, 2164049457,
    2166406887, 2168753216, 2171091108, 2173431690, 2175782770, 2178141506, 2180498146, 2182844997,
    2185184373, 2187525913, 2189875303, 2192230282, 2194584513, 2196932379, 2199273561, 2201614682,
    2203962965, 2206318282, 2208673470, 2211020893, 2213360312, 2215700937, 2218050926, 2220408417,
    2222765511, 2225115188, 2227455906, 2229794254, 2232140689, 2234498951, 2236862196, 2239218800,
    2241561660, 2243896773, 2246239848, 2248598386, 2250965061, 2253327406, 2255676986, 2258014747,
    2260352052, 2262702261, 2265067835, 2267438706, 2269800195, 2272143594, 2274476963, 2276820168,
    2279182236, 2281554510, 2283922153, 2286274565, 2288612489, 2290948925, 2293298595, 2295664965,
    2298038497, 2300403794, 2302750013, 2305083403, 2307424269, 2309783733, 2312154972, 2314523395,
    2316877350, 2319216349, 2321552570, 2323899731, 2326261736, 2328631163, 2330994444, 2333341142,
    2335675829, 2338015721, 2340370679, 2342735515, 2345098021, 2347448664, 2349787955, 2352126214,
    2354473195, 2356830331, 2359191338, 2361546411, 2363889705, 2366227084, 2368570531, 2370924009,
    2373281451, 2375634156, 2377978238, 2380318169, 2382662079, 2385013366, 2387368716, 2389721628,
    2392067008, 2394406551, 2396749280, 2399101250, 2401458317, 2403811472, 2406155490, 2408494095,
    2410837019, 2413189792, 2415549008, 2417906537, 2420255181, 2422594045, 2424932142, 2427281705,
    2429644114, 2432008541, 2434362386, 2436702146, 2439037982, 2441384333, 2443745162, 2446112626,
    2448475128, 2450824181, 2453160740, 2455498173, 2457851483, 2460220830, 2462592469, 2464950733,
)


@lru_cache(maxsize=None)
def source() -> MemorySource:
    """Return the ascending node table as an ephemeris source."""
    return MemorySource(TIMESTAMPS)