"""
Static campus directory: (name, city, state, latitude, longitude).

Compiled from IPEDS and other public sources. Loaded into the campuses
table once by init_db.seed_campuses.
"""

CAMPUSES = [
    # ALABAMA
    ("University of Alabama", "Tuscaloosa", "AL", 33.2098, -87.5692),
    ("Auburn University", "Auburn", "AL", 32.6010, -85.4876),
    ("University of Alabama at Birmingham", "Birmingham", "AL", 33.5021, -86.8064),
    ("University of South Alabama", "Mobile", "AL", 30.6944, -88.1780),
    ("Alabama A&M University", "Huntsville", "AL", 34.7825, -86.5686),
    ("Troy University", "Troy", "AL", 31.7988, -85.9658),
    ("Samford University", "Birmingham", "AL", 33.4632, -86.7916),
    ("University of Alabama in Huntsville", "Huntsville", "AL", 34.7254, -86.6403),

    # ALASKA
    ("University of Alaska Anchorage", "Anchorage", "AK", 61.1900, -149.8194),
    ("University of Alaska Fairbanks", "Fairbanks", "AK", 64.8591, -147.8481),
    ("University of Alaska Southeast", "Juneau", "AK", 58.3816, -134.6345),

    # ARIZONA
    ("Arizona State University", "Tempe", "AZ", 33.4255, -111.9400),
    ("University of Arizona", "Tucson", "AZ", 32.2319, -110.9501),
    ("Northern Arizona University", "Flagstaff", "AZ", 35.1894, -111.6553),
    ("Grand Canyon University", "Phoenix", "AZ", 33.5073, -112.1256),
    ("Arizona State University - West", "Glendale", "AZ", 33.5387, -112.1860),
    ("Embry-Riddle Aeronautical University", "Prescott", "AZ", 34.6145, -112.4524),

    # ARKANSAS
    ("University of Arkansas", "Fayetteville", "AR", 36.0686, -94.1748),
    ("Arkansas State University", "Jonesboro", "AR", 35.8423, -90.6751),
    ("University of Central Arkansas", "Conway", "AR", 35.0786, -92.4605),
    ("University of Arkansas at Little Rock", "Little Rock", "AR", 34.7243, -92.3439),
    ("Hendrix College", "Conway", "AR", 35.1006, -92.4421),

    # CALIFORNIA
    ("UCLA", "Los Angeles", "CA", 34.0689, -118.4452),
    ("UC Berkeley", "Berkeley", "CA", 37.8719, -122.2585),
    ("Stanford University", "Stanford", "CA", 37.4275, -122.1697),
    ("USC", "Los Angeles", "CA", 34.0224, -118.2851),
    ("UC San Diego", "La Jolla", "CA", 32.8801, -117.2340),
    ("UC Davis", "Davis", "CA", 38.5382, -121.7617),
    ("UC Irvine", "Irvine", "CA", 33.6405, -117.8443),
    ("UC Santa Barbara", "Santa Barbara", "CA", 34.4140, -119.8489),
    ("UC Santa Cruz", "Santa Cruz", "CA", 36.9916, -122.0583),
    ("UC Riverside", "Riverside", "CA", 33.9737, -117.3281),
    ("UC Merced", "Merced", "CA", 37.3660, -120.4237),
    ("Cal Poly San Luis Obispo", "San Luis Obispo", "CA", 35.3050, -120.6625),
    ("Cal Poly Pomona", "Pomona", "CA", 34.0565, -117.8215),
    ("San Diego State University", "San Diego", "CA", 32.7757, -117.0719),
    ("San Jose State University", "San Jose", "CA", 37.3352, -121.8811),
    ("CSU Long Beach", "Long Beach", "CA", 33.7838, -118.1141),
    ("CSU Fullerton", "Fullerton", "CA", 33.8829, -117.8854),
    ("CSU Northridge", "Northridge", "CA", 34.2400, -118.5291),
    ("CSU Sacramento", "Sacramento", "CA", 38.5607, -121.4240),
    ("Fresno State", "Fresno", "CA", 36.8134, -119.7483),
    ("San Francisco State University", "San Francisco", "CA", 37.7219, -122.4782),
    ("Caltech", "Pasadena", "CA", 34.1377, -118.1253),
    ("Pepperdine University", "Malibu", "CA", 34.0366, -118.7084),
    ("Santa Clara University", "Santa Clara", "CA", 37.3496, -121.9390),
    ("Loyola Marymount University", "Los Angeles", "CA", 33.9692, -118.4181),
    ("University of San Diego", "San Diego", "CA", 32.7714, -117.1880),
    ("University of San Francisco", "San Francisco", "CA", 37.7765, -122.4506),
    ("Chapman University", "Orange", "CA", 33.7930, -117.8514),
    ("CSU Chico", "Chico", "CA", 39.7299, -121.8454),
    ("Humboldt State University", "Arcata", "CA", 40.8757, -124.0786),

    # COLORADO
    ("University of Colorado Boulder", "Boulder", "CO", 40.0076, -105.2659),
    ("Colorado State University", "Fort Collins", "CO", 40.5734, -105.0865),
    ("University of Denver", "Denver", "CO", 39.6766, -104.9619),
    ("Colorado School of Mines", "Golden", "CO", 39.7512, -105.2227),
    ("University of Colorado Denver", "Denver", "CO", 39.7458, -105.0076),
    ("University of Colorado Colorado Springs", "Colorado Springs", "CO", 38.8934, -104.8008),
    ("University of Northern Colorado", "Greeley", "CO", 40.4053, -104.6997),
    ("Colorado College", "Colorado Springs", "CO", 38.8469, -104.8252),

    # CONNECTICUT
    ("Yale University", "New Haven", "CT", 41.3163, -72.9223),
    ("University of Connecticut", "Storrs", "CT", 41.8084, -72.2495),
    ("Wesleyan University", "Middletown", "CT", 41.5565, -72.6566),
    ("Trinity College", "Hartford", "CT", 41.7474, -72.6910),
    ("Connecticut College", "New London", "CT", 41.3793, -72.1051),
    ("Quinnipiac University", "Hamden", "CT", 41.4190, -72.8932),
    ("Sacred Heart University", "Fairfield", "CT", 41.2209, -73.2387),
    ("University of Hartford", "West Hartford", "CT", 41.8002, -72.7667),

    # DELAWARE
    ("University of Delaware", "Newark", "DE", 39.6780, -75.7506),
    ("Delaware State University", "Dover", "DE", 39.1874, -75.5426),

    # FLORIDA
    ("University of Florida", "Gainesville", "FL", 29.6436, -82.3549),
    ("Florida State University", "Tallahassee", "FL", 30.4419, -84.2985),
    ("University of Miami", "Coral Gables", "FL", 25.7215, -80.2794),
    ("University of Central Florida", "Orlando", "FL", 28.6024, -81.2001),
    ("University of South Florida", "Tampa", "FL", 28.0587, -82.4139),
    ("Florida International University", "Miami", "FL", 25.7563, -80.3755),
    ("Florida Atlantic University", "Boca Raton", "FL", 26.3705, -80.1013),
    ("Florida Gulf Coast University", "Fort Myers", "FL", 26.4645, -81.7708),
    ("University of North Florida", "Jacksonville", "FL", 30.2715, -81.5106),
    ("Florida A&M University", "Tallahassee", "FL", 30.4257, -84.2889),
    ("Stetson University", "DeLand", "FL", 29.0349, -81.3034),
    ("Rollins College", "Winter Park", "FL", 28.5960, -81.3496),
    ("University of Tampa", "Tampa", "FL", 27.9467, -82.4651),
    ("Nova Southeastern University", "Fort Lauderdale", "FL", 26.0772, -80.2467),

    # GEORGIA
    ("Georgia Tech", "Atlanta", "GA", 33.7756, -84.3963),
    ("University of Georgia", "Athens", "GA", 33.9480, -83.3773),
    ("Emory University", "Atlanta", "GA", 33.7909, -84.3263),
    ("Georgia State University", "Atlanta", "GA", 33.7530, -84.3853),
    ("Kennesaw State University", "Kennesaw", "GA", 34.0380, -84.5806),
    ("Georgia Southern University", "Statesboro", "GA", 32.4226, -81.7831),
    ("Augusta University", "Augusta", "GA", 33.4735, -82.0105),
    ("Mercer University", "Macon", "GA", 32.8301, -83.6499),
    ("Spelman College", "Atlanta", "GA", 33.7465, -84.4132),
    ("Morehouse College", "Atlanta", "GA", 33.7474, -84.4142),
    ("Clark Atlanta University", "Atlanta", "GA", 33.7547, -84.4143),

    # HAWAII
    ("University of Hawaii at Manoa", "Honolulu", "HI", 21.2969, -157.8171),
    ("University of Hawaii at Hilo", "Hilo", "HI", 19.7003, -155.0789),
    ("Hawaii Pacific University", "Honolulu", "HI", 21.3069, -157.8583),

    # IDAHO
    ("University of Idaho", "Moscow", "ID", 46.7262, -117.0145),
    ("Boise State University", "Boise", "ID", 43.6036, -116.2025),
    ("Idaho State University", "Pocatello", "ID", 42.8606, -112.4318),
    ("Brigham Young University-Idaho", "Rexburg", "ID", 43.8145, -111.7833),

    # ILLINOIS
    ("University of Illinois Urbana-Champaign", "Champaign", "IL", 40.1020, -88.2272),
    ("Northwestern University", "Evanston", "IL", 42.0565, -87.6753),
    ("University of Chicago", "Chicago", "IL", 41.7886, -87.5987),
    ("University of Illinois Chicago", "Chicago", "IL", 41.8719, -87.6484),
    ("DePaul University", "Chicago", "IL", 41.9253, -87.6556),
    ("Loyola University Chicago", "Chicago", "IL", 41.9997, -87.6581),
    ("Illinois State University", "Normal", "IL", 40.5103, -88.9988),
    ("Southern Illinois University Carbondale", "Carbondale", "IL", 37.7173, -89.2170),
    ("Northern Illinois University", "DeKalb", "IL", 41.9344, -88.7678),
    ("Eastern Illinois University", "Charleston", "IL", 39.4797, -88.1765),
    ("Western Illinois University", "Macomb", "IL", 40.4748, -90.6848),
    ("Illinois Institute of Technology", "Chicago", "IL", 41.8349, -87.6270),

    # INDIANA
    ("Indiana University Bloomington", "Bloomington", "IN", 39.1653, -86.5264),
    ("Purdue University", "West Lafayette", "IN", 40.4237, -86.9212),
    ("University of Notre Dame", "Notre Dame", "IN", 41.7052, -86.2353),
    ("Indiana University-Purdue University Indianapolis", "Indianapolis", "IN", 39.7742, -86.1754),
    ("Ball State University", "Muncie", "IN", 40.2059, -85.4086),
    ("Indiana State University", "Terre Haute", "IN", 39.4673, -87.4139),
    ("Butler University", "Indianapolis", "IN", 39.8398, -86.1694),
    ("Valparaiso University", "Valparaiso", "IN", 41.4647, -87.0445),
    ("University of Evansville", "Evansville", "IN", 37.9719, -87.5319),

    # IOWA
    ("University of Iowa", "Iowa City", "IA", 41.6611, -91.5302),
    ("Iowa State University", "Ames", "IA", 42.0267, -93.6465),
    ("University of Northern Iowa", "Cedar Falls", "IA", 42.5136, -92.4631),
    ("Drake University", "Des Moines", "IA", 41.6046, -93.6536),
    ("Grinnell College", "Grinnell", "IA", 41.7477, -92.7241),

    # KANSAS
    ("University of Kansas", "Lawrence", "KS", 38.9543, -95.2558),
    ("Kansas State University", "Manhattan", "KS", 39.1974, -96.5847),
    ("Wichita State University", "Wichita", "KS", 37.7195, -97.2931),
    ("Emporia State University", "Emporia", "KS", 38.4137, -96.1840),

    # KENTUCKY
    ("University of Kentucky", "Lexington", "KY", 38.0317, -84.5040),
    ("University of Louisville", "Louisville", "KY", 38.2138, -85.7585),
    ("Western Kentucky University", "Bowling Green", "KY", 36.9871, -86.4564),
    ("Eastern Kentucky University", "Richmond", "KY", 37.7354, -84.2954),
    ("Murray State University", "Murray", "KY", 36.6190, -88.3256),
    ("Northern Kentucky University", "Highland Heights", "KY", 39.0328, -84.4655),

    # LOUISIANA
    ("Louisiana State University", "Baton Rouge", "LA", 30.4133, -91.1800),
    ("Tulane University", "New Orleans", "LA", 29.9396, -90.1210),
    ("University of New Orleans", "New Orleans", "LA", 30.0274, -90.0677),
    ("Louisiana Tech University", "Ruston", "LA", 32.5265, -92.6475),
    ("University of Louisiana at Lafayette", "Lafayette", "LA", 30.2133, -92.0188),
    ("Loyola University New Orleans", "New Orleans", "LA", 29.9352, -90.1227),
    ("Southern University", "Baton Rouge", "LA", 30.5177, -91.1908),

    # MAINE
    ("University of Maine", "Orono", "ME", 44.9012, -68.6719),
    ("Bowdoin College", "Brunswick", "ME", 43.9069, -69.9636),
    ("Bates College", "Lewiston", "ME", 44.1053, -70.2026),
    ("Colby College", "Waterville", "ME", 44.5639, -69.6625),

    # MARYLAND
    ("University of Maryland", "College Park", "MD", 38.9869, -76.9426),
    ("Johns Hopkins University", "Baltimore", "MD", 39.3299, -76.6205),
    ("Towson University", "Towson", "MD", 39.3941, -76.6106),
    ("University of Maryland Baltimore County", "Baltimore", "MD", 39.2557, -76.7116),
    ("Salisbury University", "Salisbury", "MD", 38.3724, -75.5995),
    ("Morgan State University", "Baltimore", "MD", 39.3431, -76.5835),
    ("United States Naval Academy", "Annapolis", "MD", 38.9850, -76.4867),
    ("Loyola University Maryland", "Baltimore", "MD", 39.3510, -76.6220),

    # MASSACHUSETTS
    ("MIT", "Cambridge", "MA", 42.3601, -71.0942),
    ("Harvard University", "Cambridge", "MA", 42.3770, -71.1167),
    ("Boston University", "Boston", "MA", 42.3505, -71.1054),
    ("Boston College", "Chestnut Hill", "MA", 42.3355, -71.1685),
    ("Northeastern University", "Boston", "MA", 42.3398, -71.0892),
    ("Tufts University", "Medford", "MA", 42.4085, -71.1183),
    ("UMass Amherst", "Amherst", "MA", 42.3912, -72.5267),
    ("UMass Boston", "Boston", "MA", 42.3132, -71.0378),
    ("UMass Lowell", "Lowell", "MA", 42.6550, -71.3247),
    ("Brandeis University", "Waltham", "MA", 42.3661, -71.2614),
    ("Williams College", "Williamstown", "MA", 42.7137, -73.2036),
    ("Amherst College", "Amherst", "MA", 42.3711, -72.5170),
    ("Wellesley College", "Wellesley", "MA", 42.2936, -71.3057),
    ("Smith College", "Northampton", "MA", 42.3181, -72.6387),
    ("Worcester Polytechnic Institute", "Worcester", "MA", 42.2746, -71.8063),
    ("College of the Holy Cross", "Worcester", "MA", 42.2363, -71.8087),

    # MICHIGAN
    ("University of Michigan", "Ann Arbor", "MI", 42.2780, -83.7382),
    ("Michigan State University", "East Lansing", "MI", 42.7018, -84.4822),
    ("Wayne State University", "Detroit", "MI", 42.3573, -83.0694),
    ("Western Michigan University", "Kalamazoo", "MI", 42.2833, -85.6140),
    ("Central Michigan University", "Mount Pleasant", "MI", 43.5925, -84.7751),
    ("Eastern Michigan University", "Ypsilanti", "MI", 42.2505, -83.6240),
    ("Grand Valley State University", "Allendale", "MI", 42.9634, -85.8894),
    ("Oakland University", "Rochester", "MI", 42.6734, -83.2185),
    ("University of Michigan-Dearborn", "Dearborn", "MI", 42.3212, -83.2324),

    # MINNESOTA
    ("University of Minnesota", "Minneapolis", "MN", 44.9740, -93.2277),
    ("University of Minnesota Duluth", "Duluth", "MN", 46.8214, -92.0865),
    ("Minnesota State University Mankato", "Mankato", "MN", 44.1461, -93.9987),
    ("St. Cloud State University", "St. Cloud", "MN", 45.5515, -94.1511),
    ("University of St. Thomas", "St. Paul", "MN", 44.9432, -93.1910),
    ("Macalester College", "St. Paul", "MN", 44.9383, -93.1691),
    ("Carleton College", "Northfield", "MN", 44.4606, -93.1538),

    # MISSISSIPPI
    ("University of Mississippi", "Oxford", "MS", 34.3650, -89.5344),
    ("Mississippi State University", "Starkville", "MS", 33.4552, -88.7893),
    ("University of Southern Mississippi", "Hattiesburg", "MS", 31.3271, -89.3325),
    ("Jackson State University", "Jackson", "MS", 32.2974, -90.2089),

    # MISSOURI
    ("University of Missouri", "Columbia", "MO", 38.9404, -92.3277),
    ("Washington University in St. Louis", "St. Louis", "MO", 38.6488, -90.3108),
    ("Saint Louis University", "St. Louis", "MO", 38.6359, -90.2341),
    ("Missouri State University", "Springfield", "MO", 37.2050, -93.2818),
    ("University of Missouri-Kansas City", "Kansas City", "MO", 39.0331, -94.5758),
    ("Missouri University of Science and Technology", "Rolla", "MO", 37.9537, -91.7724),

    # MONTANA
    ("University of Montana", "Missoula", "MT", 46.8625, -113.9851),
    ("Montana State University", "Bozeman", "MT", 45.6677, -111.0492),

    # NEBRASKA
    ("University of Nebraska-Lincoln", "Lincoln", "NE", 40.8202, -96.7005),
    ("University of Nebraska at Omaha", "Omaha", "NE", 41.2584, -96.0100),
    ("Creighton University", "Omaha", "NE", 41.2655, -95.9451),

    # NEVADA
    ("University of Nevada Las Vegas", "Las Vegas", "NV", 36.1084, -115.1440),
    ("University of Nevada Reno", "Reno", "NV", 39.5439, -119.8154),

    # NEW HAMPSHIRE
    ("University of New Hampshire", "Durham", "NH", 43.1348, -70.9227),
    ("Dartmouth College", "Hanover", "NH", 43.7044, -72.2887),
    ("Southern New Hampshire University", "Manchester", "NH", 42.9636, -71.4525),

    # NEW JERSEY
    ("Princeton University", "Princeton", "NJ", 40.3431, -74.6551),
    ("Rutgers University", "New Brunswick", "NJ", 40.5008, -74.4474),
    ("Rutgers University-Newark", "Newark", "NJ", 40.7418, -74.1736),
    ("New Jersey Institute of Technology", "Newark", "NJ", 40.7421, -74.1793),
    ("Seton Hall University", "South Orange", "NJ", 40.7424, -74.2462),
    ("Stevens Institute of Technology", "Hoboken", "NJ", 40.7453, -74.0256),
    ("Montclair State University", "Montclair", "NJ", 40.8644, -74.1994),
    ("Rowan University", "Glassboro", "NJ", 39.7092, -75.1194),

    # NEW MEXICO
    ("University of New Mexico", "Albuquerque", "NM", 35.0844, -106.6189),
    ("New Mexico State University", "Las Cruces", "NM", 32.2816, -106.7476),
    ("New Mexico Tech", "Socorro", "NM", 34.0665, -106.9057),

    # NEW YORK
    ("Columbia University", "New York", "NY", 40.8075, -73.9626),
    ("New York University", "New York", "NY", 40.7295, -73.9965),
    ("Cornell University", "Ithaca", "NY", 42.4534, -76.4735),
    ("Syracuse University", "Syracuse", "NY", 43.0392, -76.1351),
    ("University at Buffalo", "Buffalo", "NY", 43.0008, -78.7890),
    ("Stony Brook University", "Stony Brook", "NY", 40.9126, -73.1234),
    ("University at Albany", "Albany", "NY", 42.6866, -73.8232),
    ("Binghamton University", "Binghamton", "NY", 42.0898, -75.9677),
    ("Rochester Institute of Technology", "Rochester", "NY", 43.0848, -77.6744),
    ("University of Rochester", "Rochester", "NY", 43.1284, -77.6287),
    ("Fordham University", "Bronx", "NY", 40.8614, -73.8855),
    ("CUNY City College", "New York", "NY", 40.8200, -73.9493),
    ("CUNY Hunter College", "New York", "NY", 40.7685, -73.9657),
    ("CUNY Baruch College", "New York", "NY", 40.7404, -73.9830),
    ("Rensselaer Polytechnic Institute", "Troy", "NY", 42.7298, -73.6789),
    ("Hofstra University", "Hempstead", "NY", 40.7147, -73.6004),
    ("Ithaca College", "Ithaca", "NY", 42.4220, -76.4947),
    ("Colgate University", "Hamilton", "NY", 42.8186, -75.5399),
    ("Vassar College", "Poughkeepsie", "NY", 41.6868, -73.8953),
    ("The New School", "New York", "NY", 40.7353, -73.9974),

    # NORTH CAROLINA
    ("Duke University", "Durham", "NC", 36.0014, -78.9382),
    ("UNC Chapel Hill", "Chapel Hill", "NC", 35.9049, -79.0469),
    ("NC State University", "Raleigh", "NC", 35.7847, -78.6821),
    ("Wake Forest University", "Winston-Salem", "NC", 36.1334, -80.2795),
    ("UNC Charlotte", "Charlotte", "NC", 35.3074, -80.7335),
    ("East Carolina University", "Greenville", "NC", 35.6079, -77.3665),
    ("Appalachian State University", "Boone", "NC", 36.2160, -81.6848),
    ("UNC Greensboro", "Greensboro", "NC", 36.0687, -79.8102),
    ("UNC Wilmington", "Wilmington", "NC", 34.2273, -77.8719),
    ("Davidson College", "Davidson", "NC", 35.5009, -80.8434),
    ("North Carolina A&T State University", "Greensboro", "NC", 36.0721, -79.7722),
    ("Elon University", "Elon", "NC", 36.1035, -79.5020),

    # NORTH DAKOTA
    ("University of North Dakota", "Grand Forks", "ND", 47.9214, -97.0779),
    ("North Dakota State University", "Fargo", "ND", 46.8973, -96.8018),

    # OHIO
    ("Ohio State University", "Columbus", "OH", 40.0067, -83.0305),
    ("Case Western Reserve University", "Cleveland", "OH", 41.5045, -81.6089),
    ("University of Cincinnati", "Cincinnati", "OH", 39.1329, -84.5150),
    ("Miami University", "Oxford", "OH", 39.5127, -84.7319),
    ("Ohio University", "Athens", "OH", 39.3240, -82.1013),
    ("Kent State University", "Kent", "OH", 41.1489, -81.3413),
    ("University of Akron", "Akron", "OH", 41.0755, -81.5085),
    ("Bowling Green State University", "Bowling Green", "OH", 41.3783, -83.6302),
    ("University of Toledo", "Toledo", "OH", 41.6577, -83.6154),
    ("Wright State University", "Dayton", "OH", 39.7813, -84.0624),
    ("Cleveland State University", "Cleveland", "OH", 41.5017, -81.6749),
    ("Oberlin College", "Oberlin", "OH", 41.2932, -82.2174),
    ("Denison University", "Granville", "OH", 40.0729, -82.5276),

    # OKLAHOMA
    ("University of Oklahoma", "Norman", "OK", 35.2058, -97.4457),
    ("Oklahoma State University", "Stillwater", "OK", 36.1256, -97.0693),
    ("University of Tulsa", "Tulsa", "OK", 36.1511, -95.9469),
    ("University of Central Oklahoma", "Edmond", "OK", 35.6559, -97.4739),

    # OREGON
    ("University of Oregon", "Eugene", "OR", 44.0448, -123.0726),
    ("Oregon State University", "Corvallis", "OR", 44.5646, -123.2620),
    ("Portland State University", "Portland", "OR", 45.5118, -122.6847),
    ("University of Portland", "Portland", "OR", 45.5720, -122.7264),
    ("Lewis & Clark College", "Portland", "OR", 45.4503, -122.6714),
    ("Reed College", "Portland", "OR", 45.4794, -122.6324),

    # PENNSYLVANIA
    ("University of Pennsylvania", "Philadelphia", "PA", 39.9522, -75.1932),
    ("Penn State University", "University Park", "PA", 40.7982, -77.8599),
    ("Carnegie Mellon University", "Pittsburgh", "PA", 40.4433, -79.9436),
    ("University of Pittsburgh", "Pittsburgh", "PA", 40.4444, -79.9608),
    ("Temple University", "Philadelphia", "PA", 39.9812, -75.1554),
    ("Drexel University", "Philadelphia", "PA", 39.9566, -75.1899),
    ("Villanova University", "Villanova", "PA", 40.0381, -75.3445),
    ("Lehigh University", "Bethlehem", "PA", 40.6065, -75.3782),
    ("Duquesne University", "Pittsburgh", "PA", 40.4361, -79.9903),
    ("Penn State Harrisburg", "Middletown", "PA", 40.1973, -76.7289),
    ("Bucknell University", "Lewisburg", "PA", 40.9547, -76.8828),
    ("Lafayette College", "Easton", "PA", 40.6985, -75.2154),
    ("Haverford College", "Haverford", "PA", 40.0111, -75.3063),
    ("Swarthmore College", "Swarthmore", "PA", 39.9023, -75.3573),
    ("Bryn Mawr College", "Bryn Mawr", "PA", 40.0268, -75.3148),

    # RHODE ISLAND
    ("Brown University", "Providence", "RI", 41.8268, -71.4025),
    ("University of Rhode Island", "Kingston", "RI", 41.4803, -71.5253),
    ("Providence College", "Providence", "RI", 41.8410, -71.4359),
    ("Rhode Island School of Design", "Providence", "RI", 41.8262, -71.4099),

    # SOUTH CAROLINA
    ("University of South Carolina", "Columbia", "SC", 33.9932, -81.0279),
    ("Clemson University", "Clemson", "SC", 34.6766, -82.8374),
    ("College of Charleston", "Charleston", "SC", 32.7835, -79.9374),
    ("Furman University", "Greenville", "SC", 34.9249, -82.4390),
    ("Coastal Carolina University", "Conway", "SC", 33.7942, -79.0194),

    # SOUTH DAKOTA
    ("University of South Dakota", "Vermillion", "SD", 42.7876, -96.9289),
    ("South Dakota State University", "Brookings", "SD", 44.3191, -96.7841),

    # TENNESSEE
    ("Vanderbilt University", "Nashville", "TN", 36.1447, -86.8027),
    ("University of Tennessee", "Knoxville", "TN", 35.9544, -83.9295),
    ("University of Memphis", "Memphis", "TN", 35.1187, -89.9378),
    ("Middle Tennessee State University", "Murfreesboro", "TN", 35.8489, -86.3627),
    ("Tennessee State University", "Nashville", "TN", 36.1683, -86.8313),
    ("East Tennessee State University", "Johnson City", "TN", 36.3029, -82.3695),
    ("Belmont University", "Nashville", "TN", 36.1334, -86.7916),
    ("Rhodes College", "Memphis", "TN", 35.1534, -89.9887),

    # TEXAS
    ("University of Texas at Austin", "Austin", "TX", 30.2849, -97.7341),
    ("Texas A&M University", "College Station", "TX", 30.6187, -96.3365),
    ("Rice University", "Houston", "TX", 29.7174, -95.4018),
    ("University of Houston", "Houston", "TX", 29.7199, -95.3422),
    ("UT Dallas", "Richardson", "TX", 32.9857, -96.7502),
    ("Texas Tech University", "Lubbock", "TX", 33.5843, -101.8783),
    ("UT San Antonio", "San Antonio", "TX", 29.5826, -98.6199),
    ("UT Arlington", "Arlington", "TX", 32.7299, -97.1132),
    ("Baylor University", "Waco", "TX", 31.5460, -97.1186),
    ("SMU", "Dallas", "TX", 32.8418, -96.7851),
    ("TCU", "Fort Worth", "TX", 32.7098, -97.3628),
    ("Texas State University", "San Marcos", "TX", 29.8884, -97.9384),
    ("University of North Texas", "Denton", "TX", 33.2109, -97.1470),
    ("UT El Paso", "El Paso", "TX", 31.7713, -106.5040),
    ("UT Rio Grande Valley", "Edinburg", "TX", 26.3077, -98.1737),
    ("Sam Houston State University", "Huntsville", "TX", 30.7163, -95.5472),
    ("Prairie View A&M University", "Prairie View", "TX", 30.0952, -95.9880),
    ("Texas Southern University", "Houston", "TX", 29.7237, -95.3552),

    # UTAH
    ("University of Utah", "Salt Lake City", "UT", 40.7649, -111.8421),
    ("Brigham Young University", "Provo", "UT", 40.2519, -111.6493),
    ("Utah State University", "Logan", "UT", 41.7420, -111.8097),
    ("Utah Valley University", "Orem", "UT", 40.2769, -111.7147),
    ("Weber State University", "Ogden", "UT", 41.1929, -111.9344),

    # VERMONT
    ("University of Vermont", "Burlington", "VT", 44.4779, -73.1965),
    ("Middlebury College", "Middlebury", "VT", 44.0086, -73.1765),
    ("Bennington College", "Bennington", "VT", 42.9235, -73.2327),

    # VIRGINIA
    ("University of Virginia", "Charlottesville", "VA", 38.0336, -78.5080),
    ("Virginia Tech", "Blacksburg", "VA", 37.2296, -80.4139),
    ("William & Mary", "Williamsburg", "VA", 37.2707, -76.7075),
    ("Virginia Commonwealth University", "Richmond", "VA", 37.5499, -77.4513),
    ("George Mason University", "Fairfax", "VA", 38.8316, -77.3081),
    ("James Madison University", "Harrisonburg", "VA", 38.4375, -78.8714),
    ("Old Dominion University", "Norfolk", "VA", 36.8851, -76.3055),
    ("Virginia State University", "Petersburg", "VA", 37.2392, -77.4222),
    ("Liberty University", "Lynchburg", "VA", 37.3524, -79.1765),
    ("Radford University", "Radford", "VA", 37.1362, -80.5561),
    ("Washington and Lee University", "Lexington", "VA", 37.7916, -79.4439),
    ("University of Richmond", "Richmond", "VA", 37.5742, -77.5400),
    ("Hampton University", "Hampton", "VA", 37.0219, -76.3357),
    ("Norfolk State University", "Norfolk", "VA", 36.8474, -76.2696),

    # WASHINGTON
    ("University of Washington", "Seattle", "WA", 47.6553, -122.3035),
    ("Washington State University", "Pullman", "WA", 46.7298, -117.1817),
    ("Seattle University", "Seattle", "WA", 47.6103, -122.3196),
    ("Gonzaga University", "Spokane", "WA", 47.6671, -117.4017),
    ("Western Washington University", "Bellingham", "WA", 48.7340, -122.4866),
    ("Eastern Washington University", "Cheney", "WA", 47.4891, -117.5755),
    ("Central Washington University", "Ellensburg", "WA", 46.9965, -120.5478),
    ("University of Puget Sound", "Tacoma", "WA", 47.2636, -122.4814),
    ("Whitman College", "Walla Walla", "WA", 46.0715, -118.3296),

    # WEST VIRGINIA
    ("West Virginia University", "Morgantown", "WV", 39.6350, -79.9545),
    ("Marshall University", "Huntington", "WV", 38.4242, -82.4267),

    # WISCONSIN
    ("University of Wisconsin-Madison", "Madison", "WI", 43.0766, -89.4125),
    ("University of Wisconsin-Milwaukee", "Milwaukee", "WI", 43.0766, -87.8813),
    ("Marquette University", "Milwaukee", "WI", 43.0389, -87.9298),
    ("UW-La Crosse", "La Crosse", "WI", 43.8128, -91.2270),
    ("UW-Eau Claire", "Eau Claire", "WI", 44.7985, -91.4963),
    ("UW-Green Bay", "Green Bay", "WI", 44.5316, -87.9212),
    ("UW-Oshkosh", "Oshkosh", "WI", 44.0267, -88.5542),
    ("UW-Whitewater", "Whitewater", "WI", 42.8405, -88.7376),
    ("Lawrence University", "Appleton", "WI", 44.2613, -88.3991),

    # WYOMING
    ("University of Wyoming", "Laramie", "WY", 41.3149, -105.5666),

    # DISTRICT OF COLUMBIA
    ("Georgetown University", "Washington", "DC", 38.9076, -77.0723),
    ("George Washington University", "Washington", "DC", 38.8997, -77.0486),
    ("American University", "Washington", "DC", 38.9365, -77.0878),
    ("Howard University", "Washington", "DC", 38.9225, -77.0195),
    ("Catholic University of America", "Washington", "DC", 38.9339, -76.9989),
    ("Gallaudet University", "Washington", "DC", 38.9082, -76.9927),

    # PUERTO RICO
    ("University of Puerto Rico - Río Piedras", "San Juan", "PR", 18.4034, -66.0489),
    ("University of Puerto Rico - Mayagüez", "Mayagüez", "PR", 18.2110, -67.1414),
    ("Inter American University of Puerto Rico", "San Juan", "PR", 18.3950, -66.0613),
]
