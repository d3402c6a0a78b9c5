"""Body metric formulas.

BMI, Deurenberg body-fat estimate and Mifflin-St Jeor BMR. The functions are
pure; missing profile fields degrade to the defaults below instead of failing.
"""

from healthy_tracker.domain.models import ResolvedProfile, UserProfile

# Sedentary-to-light activity factor applied to BMR for TDEE.
ACTIVITY_MULTIPLIER = 1.2
DEFAULT_AGE = 25
MALE = "M"

# Deurenberg: 1.2 * BMI + 0.23 * age - 10.8 * sex - 5.4, sex = 1 for men.
BODY_FAT_BMI_FACTOR = 1.2
BODY_FAT_AGE_FACTOR = 0.23
BODY_FAT_OFFSET = 5.4
BODY_FAT_MALE_OFFSET = 10.8

# Mifflin-St Jeor.
BMR_WEIGHT_FACTOR = 10
BMR_HEIGHT_FACTOR = 6.25
BMR_AGE_FACTOR = 5
BMR_MALE_OFFSET = 5
BMR_FEMALE_OFFSET = -161

BMI_DECIMALS = 1
BODY_FAT_DECIMALS = 2


def body_mass_index(weight_kg: float | None, height_cm: float | None) -> float:
    """Return the unrounded BMI, or 0 when height is unknown."""
    if not height_cm or height_cm <= 0:
        return 0.0
    height_m = height_cm / 100.0
    return (weight_kg or 0.0) / (height_m * height_m)


def compute_bmi(weight_kg: float | None, height_cm: float | None) -> float:
    """Return BMI rounded for display; 0 means unavailable."""
    return round(body_mass_index(weight_kg, height_cm), BMI_DECIMALS)


def compute_body_fat(bmi: float, age: int | None, gender: str | None) -> float:
    """Estimate body-fat percentage from BMI, age and sex."""
    resolved_age = DEFAULT_AGE if age is None else age
    body_fat = (
        BODY_FAT_BMI_FACTOR * bmi + BODY_FAT_AGE_FACTOR * resolved_age - BODY_FAT_OFFSET
    )
    if gender == MALE:
        body_fat -= BODY_FAT_MALE_OFFSET
    return round(body_fat, BODY_FAT_DECIMALS)


def compute_bmr(
    weight_kg: float | None,
    height_cm: float | None,
    age: int | None,
    gender: str | None,
) -> float:
    """Return the unrounded basal metabolic rate in kcal/day."""
    resolved_age = DEFAULT_AGE if age is None else age
    base = (
        BMR_WEIGHT_FACTOR * (weight_kg or 0.0)
        + BMR_HEIGHT_FACTOR * (height_cm or 0.0)
        - BMR_AGE_FACTOR * resolved_age
    )
    if gender == MALE:
        return base + BMR_MALE_OFFSET
    return base + BMR_FEMALE_OFFSET


def resolve_profile(
    profile: UserProfile, weight_kg: float | None = None
) -> ResolvedProfile:
    """Apply formula defaults to a profile.

    An explicit ``weight_kg`` (for example the day's weigh-in) takes precedence
    over the profile's initial weight.
    """
    if weight_kg is None:
        weight_kg = profile.initial_weight_kg
    return ResolvedProfile(
        user_id=profile.id,
        age=DEFAULT_AGE if profile.age is None else profile.age,
        gender=profile.gender,
        height_cm=profile.height_cm or 0.0,
        weight_kg=weight_kg or 0.0,
    )


def bmr_for(profile: ResolvedProfile) -> float:
    return compute_bmr(
        profile.weight_kg, profile.height_cm, profile.age, profile.gender
    )


def body_fat_for(profile: UserProfile, weight_kg: float) -> float | None:
    """Return the body-fat estimate for a weigh-in, if height is known."""
    if not profile.height_cm or profile.height_cm <= 0:
        return None
    resolved = resolve_profile(profile, weight_kg)
    bmi = body_mass_index(resolved.weight_kg, resolved.height_cm)
    return compute_body_fat(bmi, resolved.age, resolved.gender)
