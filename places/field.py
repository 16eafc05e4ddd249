from models.codes import WireCode


class Field(WireCode):
    """Place data fields that can be requested from Place Details.

    Fields are billed by category (basic, contact, atmosphere), so request
    only what is displayed.
    """
    # Basic
    ADDRESS_COMPONENT = "address_component"
    ADR_ADDRESS = "adr_address"
    BUSINESS_STATUS = "business_status"
    FORMATTED_ADDRESS = "formatted_address"
    GEOMETRY = "geometry"
    ICON = "icon"
    ICON_BACKGROUND_COLOR = "icon_background_color"
    ICON_MASK_BASE_URI = "icon_mask_base_uri"
    NAME = "name"
    PHOTO = "photo"
    PLACE_ID = "place_id"
    PLUS_CODE = "plus_code"
    TYPE = "type"
    URL = "url"
    UTC_OFFSET = "utc_offset"
    VICINITY = "vicinity"
    WHEELCHAIR_ACCESSIBLE_ENTRANCE = "wheelchair_accessible_entrance"
    # Contact
    CURRENT_OPENING_HOURS = "current_opening_hours"
    FORMATTED_PHONE_NUMBER = "formatted_phone_number"
    INTERNATIONAL_PHONE_NUMBER = "international_phone_number"
    OPENING_HOURS = "opening_hours"
    SECONDARY_OPENING_HOURS = "secondary_opening_hours"
    WEBSITE = "website"
    # Atmosphere
    CURBSIDE_PICKUP = "curbside_pickup"
    DELIVERY = "delivery"
    DINE_IN = "dine_in"
    EDITORIAL_SUMMARY = "editorial_summary"
    PRICE_LEVEL = "price_level"
    RATING = "rating"
    RESERVABLE = "reservable"
    REVIEWS = "reviews"
    SERVES_BEER = "serves_beer"
    SERVES_BREAKFAST = "serves_breakfast"
    SERVES_BRUNCH = "serves_brunch"
    SERVES_DINNER = "serves_dinner"
    SERVES_LUNCH = "serves_lunch"
    SERVES_VEGETARIAN_FOOD = "serves_vegetarian_food"
    SERVES_WINE = "serves_wine"
    TAKEOUT = "takeout"
    USER_RATINGS_TOTAL = "user_ratings_total"
