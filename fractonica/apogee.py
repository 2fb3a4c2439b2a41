"""Timestamps of successive lunar apogees, starting in January 2010."""

from __future__ import annotations

from functools import lru_cache

from .ephemeris import MemorySource

EPOCH = 1263693334
"""First apogee in the table: 2010-01-17T01:55:34+00:00."""

AVERAGE_PERIOD = 2380588
"""Average length of an anomalistic month in the table, in seconds."""

COUNT = 512

TIMESTAMPS: tuple[int, ...] = (
    1263693334, 1266027867, 1268388983, 1270781295, 1273182740, 1275583690, 1277978952, 1280360540,
    1282714675, 1285055420, 1287425479, 1289821504, 1292229453, 1294638172, 1297034484, 1299398711,
    1301735889, 1304100664, 1306490472, 1308888765, 1311288313, 1313684286, 1316067278, 1318418832,
    1320757572, 1323133626, 1325535528, 1327945441, 1330351565, 1332742303, 1335103391, 1337445018,
    1339810361, 1342198226, 1344596036, 1346997597, 1349397491, 1351783172, 1354130461, 1356469544,
    1358851540, 1361255287, 1363662844, 1366064677, 1368452442, 1370814973, 1373158248, 1375520570,
    1377906717, 1380305926, 1382710943, 1385113450, 1387496333, 1389836114, 1392180988, 1394566855,
    1396968597, 1399371777, 1401769786, 1404155998, 1406518906, 1408861394, 1411223495, 1413612655,
    1416016589, 1418425179, 1420827096, 1423203241, 1425539618, 1427892514, 1430279310, 1432678159,
    1435078927, 1437476953, 1439865749, 1442230834, 1444570446, 1446933516, 1449327577, 1451735530,
    1454144732, 1456543256, 1458914652, 1461253726, 1463608447, 1465991608, 1468387406, 1470787739,
    1473187885, 1475579528, 1477943028, 1480278170, 1482645753, 1485044192, 1487452346, 1489857674,
    1492250282, 1494617984, 1496959441, 1499314450, 1501696154, 1504092330, 1506495235, 1508898744,
    1511291039, 1513647776, 1515983084, 1518359018, 1520759737, 1523165347, 1525566620, 1527956906,
    1530325945, 1532669220, 1535022729, 1537404610, 1539803878, 1542211270, 1544617924, 1547008776,
    1549359984, 1551699675, 1554078072, 1556475700, 1558877144, 1561276062, 1563666915, 1566038398,
    1568380673, 1570731528, 1573115566, 1575518995, 1577928850, 1580333627, 1582717592, 1585064471,
    1587410089, 1589788281, 1592182732, 1594582031, 1596980938, 1599373413, 1601745032, 1604082562,
    1606436322, 1608827325, 1611234719, 1613643904, 1616044167, 1618423052, 1620771078, 1623120014,
    1625496786, 1627889964, 1630290250, 1632692510, 1635088935, 1637460081, 1639792774, 1642151831,
    1644546861, 1646953441, 1649358785, 1651755113, 1654133189, 1656483959, 1658831667, 1661205635,
    1663598897, 1666002067, 1668407819, 1670804546, 1673168813, 1675499881, 1677865902, 1680261241,
    1682664135, 1685065266, 1687459100, 1689836996, 1692187768, 1694534147, 1696909785, 1699307538,
    1701715280, 1704122659, 1706515599, 1708872161, 1711207715, 1713578488, 1715972056, 1718372085,
    1720772157, 1723167634, 1725548756, 1727898985, 1730243051, 1732622560, 1735025199, 1737435128,
    1739840733, 1742228898, 1744583610, 1746923587, 1749292459, 1751682307, 1754080717, 1756481949,
    1758880417, 1761262944, 1763607946, 1765952441, 1768337571, 1770742379, 1773150045, 1775550372,
    1777933336, 1780287521, 1782629653, 1784997336, 1787386718, 1789786976, 1792191667, 1794592733,
    1796972367, 1799310358, 1801662184, 1804052740, 1806456771, 1808860687, 1811257710, 1813640396,
    1815997087, 1818338897, 1820705442, 1823096766, 1825501244, 1827910019, 1830312018, 1832687123,
    1835023563, 1837380856, 1839770254, 1842170118, 1844570689, 1846966997, 1849351615, 1851709801,
    1854048318, 1856414854, 1858810076, 1861218170, 1863627155, 1866024413, 1868392059, 1870730599,
    1873091374, 1875478386, 1877875556, 1880275314, 1882672860, 1885059153, 1887414439, 1889750303,
    1892123513, 1894524604, 1896934079, 1899340037, 1901732034, 1904097136, 1906439490, 1908800643,
    1911185962, 1913583114, 1915985361, 1918387042, 1920775827, 1923126588, 1925462715, 1927841867,
    1930244125, 1932650684, 1935052372, 1937441852, 1939808418, 1942152242, 1944510466, 1946894436,
    1949293484, 1951699394, 1954103365, 1956488833, 1958831777, 1961173685, 1963556480, 1965956394,
    1968358729, 1970757157, 1973145627, 1975512636, 1977855165, 1980213230, 1982600904, 1985005041,
    1987414268, 1989817140, 1992195980, 1994535541, 1996884878, 1999268280, 2001665415, 2004065805,
    2006464775, 2008856207, 2011225523, 2013564738, 2015923910, 2018316763, 2020724497, 2023133597,
    2025532702, 2027907201, 2030249281, 2032600181, 2034979959, 2037374379, 2039774790, 2042176245,
    2044570542, 2046937905, 2049272174, 2051636409, 2054033450, 2056440750, 2058845650, 2061239215,
    2063610547, 2065954390, 2068305478, 2070684189, 2073079579, 2075483103, 2077888100, 2080282825,
    2082643259, 2084977269, 2087349842, 2089748620, 2092153074, 2094554195, 2096946046, 2099319037,
    2101664587, 2104013939, 2106393117, 2108792040, 2111200068, 2113607687, 2116000417, 2118355465,
    2120693739, 2123068343, 2125463683, 2127864123, 2130263315, 2132656060, 2135031494, 2137375798,
    2139722492, 2142104455, 2144507663, 2146917641, 2149322749, 2151708590, 2154059387, 2156403012,
    2158777415, 2161169914, 2163568772, 2165968532, 2168363319, 2170738933, 2173077713, 2175427471,
    2177816802, 2180223556, 2182632281, 2185032813, 2187414249, 2189766168, 2192112595, 2194485632,
    2196877238, 2199277580, 2201681053, 2204079738, 2206454588, 2208788247, 2211143489, 2213536391,
    2215941646, 2218346288, 2220743220, 2223124202, 2225478633, 2227823827, 2230194265, 2232586448,
    2234990059, 2237396921, 2239795367, 2242163034, 2244494732, 2246856975, 2249249812, 2251651320,
    2254052181, 2256447229, 2258828403, 2261182621, 2263526008, 2265898624, 2268295894, 2270704067,
    2273112057, 2275506412, 2277866876, 2280202461, 2282569026, 2284960000, 2287358989, 2289759317,
    2292156471, 2294541116, 2296894702, 2299235375, 2301612282, 2304014305, 2306423978, 2308829573,
    2311219232, 2313578189, 2315917796, 2318282354, 2320669816, 2323067613, 2325469537, 2327869884,
    2330255704, 2332603529, 2334944722, 2337327503, 2339731161, 2342138050, 2344538433, 2346923522,
    2349281948, 2351623169, 2353986722, 2356374237, 2358774486, 2361180230, 2363583064, 2365965738,
    2368306271, 2370654671, 2373042510, 2375444921, 2377848092, 2380245686, 2382631017, 2384992047,
    2387332725, 2389695108, 2392085024, 2394489735, 2396899232, 2399302331, 2401680289, 2404019354,
    2406372975, 2408759205, 2411157404, 2413557586, 2415954882, 2418342332, 2420704712, 2423041753,
    2425404592, 2427798851, 2430206901, 2432615939, 2435013935, 2437384823, 2439725433, 2442082320,
    2444466363, 2446862364, 2449262329, 2451661385, 2454050750, 2456409957, 2458743618, 2461113745,
    2463513766, 2465922592, 2468328248, 2470721369, 2473090319, 2475434215, 2477791281, 2480173867,
)


@lru_cache(maxsize=None)
def source() -> MemorySource:
    """Return the apogee table as an ephemeris source."""
    return MemorySource(TIMESTAMPS)