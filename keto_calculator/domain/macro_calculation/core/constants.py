"""Named domain constants for the macro calculation engine.

Every empirical value used by the engine lives here, together with where
it comes from. Values are kept at full precision so results match the
reference calculator to the last digit.
"""

# Energy density of macronutrients (Atwater factors), kcal per gram.
KCAL_PER_GRAM_FAT = 9
KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_NET_CARBS = 4

# Mifflin-St Jeor variant used by the KetoDiet Buddy calculator:
#   BMR = 9.99 × weight(kg) + 6.25 × height(cm) - 4.92 × age(y) + offset
BMR_WEIGHT_FACTOR = 9.99
BMR_HEIGHT_FACTOR = 6.25
BMR_AGE_FACTOR = 4.92
BMR_FEMALE_OFFSET = -161
BMR_MALE_OFFSET = 5

# Protein requirement per kg of lean mass, interpolated across
# activity level 0 (sedentary) .. 1 (very active).
PROTEIN_FACTOR_MIN = 1.3
PROTEIN_FACTOR_MAX = 2.2

# Degree-4 polynomial fit of the activity multiplier over activity level,
# replacing the discrete activity-tier lookup table. Index = power.
ACTIVITY_BMR_POLYNOMIAL = (
    1.0999999999999945,
    -2.3333333333231288e-1,
    3.7999999999943399,
    -5.8666666666573466,
    3.199999999995319,
)

# Thermic effect of food / everyday activity buffer on top of the fit.
MAINTENANCE_BUFFER_FACTOR = 1.1

# Essential body fat, in percent (Wikipedia: women 8-12 %, men 3-5 %).
ESSENTIAL_BODY_FAT_FEMALE = 8
ESSENTIAL_BODY_FAT_MALE = 3

# Daily energy deficit (kcal) sustainable per kg of non-essential fat mass.
FAT_MASS_DEFICIT_KCAL = 69.2

# Hard floor for fat intake (essential fatty acids), grams per day.
MIN_FAT_GRAMS = 30

# Below this desirable intake (kcal/day) the diet is considered unsafe.
MIN_SAFE_CALORIES = 1200

# Accepted input ranges: (min, max), inclusive.
AGE_RANGE = (0, 150)
WEIGHT_RANGE = (0, 350)
HEIGHT_RANGE = (0, 250)
ACTIVITY_LEVEL_RANGE = (0, 1)
BODY_FAT_RANGE = (0, 100)
NET_CARBS_RANGE = (0, 1000)
