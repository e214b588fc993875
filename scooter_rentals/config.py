# scooter_rentals/config.py

# Starting Position
STARTING_CASH = 100.0
STARTING_SCOOTERS = 10
DEFAULT_BUSINESS_NAME = "Rusty Scooters"

# Rental Prices
OPTIMAL_RENTAL_PRICE = 15.0

# Shop Prices
PRICE_OF_SCOOTERS = 100.0
PRICE_OF_PARTS = 25.0
PRICE_OF_ADVERTS = 5.0
RESALE_PRICE = PRICE_OF_SCOOTERS / 2.0

# Mechanics Constants
CHANCE_SCOOTER_BREAKS = 0.05
ADVERT_EFFECT = 0.1        # Demand boost per advert, saturates at fleet size
PRICE_EFFECT_SCALE = 10.0  # $10 under optimal = +100% demand
DEMAND_NOISE = 0.1

# Weather
DAYS_PER_SEASON = 6
FORECAST_ACCURACY = 0.70

# Save / Terminal
SAVE_FILE_PATH = "scooter_save.json"
USE_ANY_KEY_LABEL = True
