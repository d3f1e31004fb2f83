"""Offline catalog of restaurant-chain menu items (values per listed serving)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RestaurantItem:
    id: str
    name: str
    chain: str
    category: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float | None
    sodium_mg: float | None
    sugar_g: float | None
    serving: str
    serving_grams: float
    popular: bool = False


_MCD = "McDonald's"
_BK = "Burger King"

RESTAURANT_ITEMS = (
    RestaurantItem("mcdonalds_big_mac", "Big Mac", _MCD, "burger", 550, 25, 45, 30, 3, 1010, 9, "1 sandwich", 200, popular=True),
    RestaurantItem("mcdonalds_quarter_pounder_cheese", "Quarter Pounder with Cheese", _MCD, "burger", 520, 30, 42, 27, 2, 1140, 10, "1 sandwich", 201, popular=True),
    RestaurantItem("mcdonalds_mcdouble", "McDouble", _MCD, "burger", 400, 22, 33, 20, 2, 920, 7, "1 sandwich", 155, popular=True),
    RestaurantItem("mcdonalds_mcchicken", "McChicken", _MCD, "chicken", 400, 14, 40, 21, 2, 780, 5, "1 sandwich", 143, popular=True),
    RestaurantItem("mcdonalds_10pc_mcnuggets", "10 Piece Chicken McNuggets", _MCD, "chicken", 410, 25, 25, 24, 1, 900, 0, "10 pieces", 162, popular=True),
    RestaurantItem("mcdonalds_filet_o_fish", "Filet-O-Fish", _MCD, "sandwich", 390, 16, 39, 19, 2, 580, 5, "1 sandwich", 142),
    RestaurantItem("mcdonalds_medium_fries", "Medium French Fries", _MCD, "side", 320, 5, 43, 15, 4, 260, 0, "1 medium", 117),
    RestaurantItem("mcdonalds_egg_mcmuffin", "Egg McMuffin", _MCD, "breakfast", 300, 17, 30, 13, 2, 770, 3, "1 sandwich", 137),
    RestaurantItem("mcdonalds_hash_brown", "Hash Brown", _MCD, "side", 140, 1, 16, 8, 2, 310, 0, "1 piece", 56),
    RestaurantItem("mcdonalds_cheeseburger", "Cheeseburger", _MCD, "burger", 300, 15, 32, 13, 1, 720, 7, "1 sandwich", 119),
    RestaurantItem("bk_whopper", "Whopper", _BK, "burger", 660, 28, 49, 40, 2, 980, 11, "1 sandwich", 270, popular=True),
    RestaurantItem("bk_whopper_cheese", "Whopper with Cheese", _BK, "burger", 740, 33, 49, 46, 2, 1310, 11, "1 sandwich", 291, popular=True),
    RestaurantItem("bk_original_chicken", "Original Chicken Sandwich", _BK, "chicken", 660, 24, 54, 40, 3, 1170, 7, "1 sandwich", 209, popular=True),
    RestaurantItem("bk_medium_fries", "Medium French Fries", _BK, "side", 380, 5, 53, 17, 4, 570, 0, "1 medium", 128),
    RestaurantItem("bk_onion_rings_medium", "Onion Rings (Medium)", _BK, "side", 410, 5, 51, 21, 3, 590, 6, "1 medium", 113),
    RestaurantItem("bk_impossible_whopper", "Impossible Whopper", _BK, "burger", 630, 25, 58, 34, 4, 1080, 12, "1 sandwich", 276),
    RestaurantItem("bk_cheeseburger", "Cheeseburger", _BK, "burger", 300, 16, 27, 14, 1, 710, 6, "1 sandwich", 123),
    RestaurantItem("chickfila_sandwich", "Chick-fil-A Chicken Sandwich", "Chick-fil-A", "chicken", 420, 29, 41, 18, 1, 1460, 6, "1 sandwich", 183, popular=True),
    RestaurantItem("chickfila_nuggets_8", "Chick-fil-A Nuggets (8 Count)", "Chick-fil-A", "chicken", 250, 27, 11, 11, 0, 1210, 1, "8 pieces", 113, popular=True),
    RestaurantItem("chickfila_grilled_nuggets_8", "Grilled Nuggets (8 Count)", "Chick-fil-A", "chicken", 130, 25, 1, 3, 0, 440, 1, "8 pieces", 113),
    RestaurantItem("chickfila_waffle_fries_medium", "Waffle Potato Fries (Medium)", "Chick-fil-A", "side", 420, 5, 45, 24, 5, 240, 1, "1 medium", 125),
    RestaurantItem("chipotle_chicken_burrito", "Chicken Burrito", "Chipotle", "burrito", 1055, 58, 118, 38, 14, 2480, 5, "1 burrito", 600, popular=True),
    RestaurantItem("chipotle_chicken_bowl", "Chicken Burrito Bowl", "Chipotle", "bowl", 655, 53, 62, 22, 14, 1815, 4, "1 bowl", 500, popular=True),
    RestaurantItem("chipotle_steak_bowl", "Steak Burrito Bowl", "Chipotle", "bowl", 665, 51, 62, 24, 14, 1930, 4, "1 bowl", 500),
    RestaurantItem("chipotle_chips_guac", "Chips & Guacamole", "Chipotle", "side", 770, 10, 82, 47, 14, 700, 2, "1 order", 200),
    RestaurantItem("subway_turkey_6", "6\" Oven Roasted Turkey", "Subway", "sandwich", 250, 18, 38, 3, 5, 760, 5, "6 inch sub", 220, popular=True),
    RestaurantItem("subway_italian_bmt_6", "6\" Italian B.M.T.", "Subway", "sandwich", 410, 20, 40, 19, 5, 1210, 5, "6 inch sub", 226),
    RestaurantItem("subway_chicken_teriyaki_6", "6\" Sweet Onion Chicken Teriyaki", "Subway", "sandwich", 330, 25, 52, 4, 5, 880, 17, "6 inch sub", 269),
    RestaurantItem("starbucks_caffe_latte_grande", "Caffè Latte (Grande)", "Starbucks", "drink", 190, 13, 19, 7, 0, 170, 18, "16 fl oz", 473, popular=True),
    RestaurantItem("starbucks_egg_bites_bacon", "Bacon & Gruyère Egg Bites", "Starbucks", "breakfast", 300, 19, 9, 20, 0, 680, 2, "2 bites", 130, popular=True),
    RestaurantItem("tacobell_crunchy_taco", "Crunchy Taco", "Taco Bell", "taco", 170, 8, 13, 10, 3, 310, 1, "1 taco", 78, popular=True),
    RestaurantItem("tacobell_crunchwrap", "Crunchwrap Supreme", "Taco Bell", "burrito", 530, 16, 71, 21, 6, 1200, 6, "1 wrap", 254, popular=True),
    RestaurantItem("wendys_daves_single", "Dave's Single", "Wendy's", "burger", 590, 29, 39, 34, 2, 1180, 9, "1 sandwich", 218, popular=True),
    RestaurantItem("wendys_spicy_chicken", "Spicy Chicken Sandwich", "Wendy's", "chicken", 500, 28, 50, 20, 3, 1230, 6, "1 sandwich", 213),
    RestaurantItem("sonic_cheeseburger", "Sonic Cheeseburger", "Sonic", "burger", 620, 27, 56, 31, 3, 1120, 12, "1 sandwich", 233, popular=True),
    RestaurantItem("sonic_medium_tots", "Medium Tots", "Sonic", "side", 360, 3, 42, 21, 3, 620, 0, "1 medium", 128, popular=True),
)
