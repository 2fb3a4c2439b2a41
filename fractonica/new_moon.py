"""Timestamps of successive new moons, starting in January 2010."""

from __future__ import annotations

from functools import lru_cache

from .ephemeris import MemorySource

EPOCH = 1263539508
"""First new moon in the table: 2010-01-15T07:11:48+00:00."""

AVERAGE_PERIOD = 2551444
"""Average length of a synodic month in the table, in seconds."""

COUNT = 512

TIMESTAMPS: tuple[int, ...] = (
    1263539508, 1266115909, 1268686888, 1271248156, 1273799089, 1276341301, 1278877255, 1281409715,
    1283941814, 1286477095, 1289019132, 1291570566, 1294131781, 1296700269, 1299271586, 1301841162,
    1304405458, 1306962179, 1309510461, 1312051212, 1314587073, 1317121757, 1319658982, 1322201408,
    1324750014, 1327304391, 1329863708, 1332427056, 1334992729, 1337557647, 1340118154, 1342671870,
    1345218895, 1347761464, 1350302578, 1352844513, 1355388125, 1357933439, 1360480837, 1363031494,
    1365586539, 1368145728, 1370707017, 1373267684, 1375825866, 1378381001, 1380933298, 1383483024,
    1386030180, 1388574883, 1391117935, 1393660807, 1396205115, 1398752087, 1401302436, 1403856541,
    1406414533, 1408975981, 1411539252, 1414101433, 1416659562, 1419212182, 1421759659, 1424303267,
    1426844202, 1429383448, 1431922427, 1434463549, 1437009893, 1439564031, 1442126497, 1444694770,
    1447264055, 1449829787, 1452389457, 1454942365, 1457488505, 1460028254, 1462563000, 1465095608,
    1467630097, 1470170704, 1472720613, 1475280714, 1477849121, 1480421914, 1482994413, 1485562051,
    1488121139, 1490669872, 1493209005, 1495741504, 1498271479, 1500803166, 1503340237, 1505885419,
    1508440353, 1511005358, 1513578646, 1516155456, 1518728743, 1521292325, 1523843860, 1526384905,
    1528919035, 1531450109, 1533981496, 1536516116, 1539056841, 1541606555, 1544167247, 1546738112,
    1549314244, 1551888264, 1554454247, 1557009953, 1559556145, 1562095005, 1564629150, 1567161464,
    1569695220, 1572233946, 1574780770, 1577337217, 1579902147, 1582471954, 1585042122, 1587608770,
    1590169155, 1592721720, 1595266411, 1597804932, 1600340451, 1602876706, 1605416867, 1607962627,
    1610514045, 1613070371, 1615630895, 1618194674, 1620759611, 1623322387, 1625879829, 1628430641,
    1630975938, 1633518355, 1636060517, 1638603827, 1641148445, 1643694390, 1646242519, 1648794285,
    1651350497, 1653910243, 1656471166, 1659030920, 1661588252, 1664142901, 1666694946, 1669244270,
    1671790656, 1674334428, 1676876778, 1679419421, 1681963981, 1684511617, 1687063055, 1689618741,
    1692178708, 1694742006, 1697306143, 1699867676, 1702423949, 1704974276, 1707519581, 1710061253,
    1712600484, 1715138550, 1717677492, 1720220272, 1722770012, 1725328556, 1727894982, 1730465261,
    1733034114, 1735597634, 1738154188, 1740703526, 1743245911, 1745782304, 1748314970, 1750847525,
    1753384296, 1755929211, 1758484471, 1761049543, 1763621264, 1766195021, 1768765943, 1771329701,
    1773883450, 1776426750, 1778961700, 1781492084, 1784022243, 1786556223, 1789097240, 1791647432,
    1794207761, 1796777540, 1799353483, 1801929394, 1804498200, 1807055498, 1809601148, 1812138053,
    1814670156, 1817201140, 1819734094, 1822271790, 1824817026, 1827372299, 1829938366, 1832512381,
    1835087883, 1837657908, 1840218442, 1842769009, 1845311286, 1847847738, 1850381065, 1852914257,
    1855450640, 1857993509, 1860545205, 1863105898, 1865673126, 1868242796, 1870810842, 1873374154,
    1875930666, 1878479503, 1881021385, 1883558701, 1886094918, 1888633486, 1891176756, 1893725404,
    1896278886, 1898836513, 1901397783, 1903961556, 1906525309, 1909085699, 1911640293, 1914188876,
    1916733312, 1919276254, 1921819631, 1924363968, 1926909085, 1929455365, 1932004180, 1934557047,
    1937114258, 1939674319, 1942234844, 1944793964, 1947350848, 1949905276, 1952457010, 1955005588,
    1957550833, 1960093474, 1962635105, 1965177602, 1967722572, 1970271154, 1972824129, 1975381926,
    1977944218, 1980509215, 1983073538, 1985633608, 1988187458, 1990735230, 1993278245, 1995817930,
    1998355606, 2000893025, 2003432853, 2005978388, 2008532417, 2011095610, 2013665336, 2016236379,
    2018803619, 2021364127, 2023917056, 2026462521, 2029001195, 2031534786, 2034066387, 2036600149,
    2039140412, 2041690454, 2044251192, 2046820608, 2049394489, 2051967811, 2054535760, 2057094607,
    2059642708, 2062181067, 2064712874, 2067242391, 2069773935, 2072311198, 2074856840, 2077412358,
    2079977893, 2082551483, 2085128259, 2087701193, 2090264240, 2092815229, 2095355856, 2097889817,
    2100421056, 2102952951, 2105488323, 2108029832, 2110580106, 2113140899, 2115711291, 2118286481,
    2120859407, 2123424489, 2125979693, 2128525854, 2131065148, 2133600135, 2136133566, 2138668510,
    2141208227, 2143755539, 2146311717, 2148875564, 2151443737, 2154012213, 2156577601, 2159137479,
    2161690365, 2164236055, 2166775996, 2169313092, 2171850817, 2174392044, 2176938157, 2179489011,
    2182043891, 2184602403, 2187164114, 2189727509, 2192289717, 2194847678, 2197399867, 2199947012,
    2202491371, 2205035205, 2207579564, 2210124346, 2212669496, 2215216004, 2217765641, 2220319694,
    2222877818, 2225438120, 2227998408, 2230557250, 2233113987, 2235668189, 2238219227, 2240766505,
    2243310203, 2245851588, 2248392605, 2250935217, 2253480988, 2256031047, 2258586174, 2261146590,
    2263711295, 2266277453, 2268841037, 2271398810, 2273949758, 2276494769, 2279035417, 2281573201,
    2284109732, 2286647326, 2289189148, 2291738512, 2294297436, 2296865016, 2299436940, 2302007409,
    2304572021, 2307128889, 2309677792, 2312219236, 2314754506, 2317286132, 2319817890, 2322354197,
    2324899069, 2327454763, 2330020689, 2332593454, 2335168110, 2337739499, 2340303177, 2342856400,
    2345398966, 2347933212, 2350463096, 2352993061, 2355527185, 2358068637, 2360619422, 2363180310,
    2365750428, 2368326358, 2370901902, 2373470131, 2376026836, 2378572032, 2381108728, 2383640941,
    2386172388, 2388706094, 2391244645, 2393790577, 2396346125, 2398911877, 2401485020, 2404059366,
    2406628334, 2409188193, 2411738576, 2414281162, 2416818359, 2419352758, 2421887167, 2424424662,
    2426968246, 2429519973, 2432079866, 2434645597, 2437213501, 2439780028, 2442342481, 2444898984,
    2447448598, 2449991808, 2452530720, 2455068522, 2457608379, 2460152326, 2462700782, 2465253134,
    2467808900, 2470368021, 2472929927, 2475492632, 2478053090, 2480608775, 2483159113, 2485705547,
    2488250339, 2490795052, 2493339905, 2495884580, 2498429532, 2500976394, 2503527090, 2506082438,
    2508641461, 2511202069, 2513762347, 2516321138, 2518877735, 2521431372, 2523981145, 2526526651,
    2529068639, 2531608892, 2534149587, 2536692697, 2539239744, 2541791850, 2544349684, 2546912981,
    2549479747, 2552046122, 2554607917, 2557162719, 2559710530, 2562252786, 2564791188, 2567327387,
)


@lru_cache(maxsize=None)
def source() -> MemorySource:
    """Return the new moon table as an ephemeris source."""
    return MemorySource(TIMESTAMPS)