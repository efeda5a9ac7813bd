import enum


class Category(str, enum.Enum):
    technology = "Technology"
    education = "Education"
    entertainment = "Entertainment"
    gaming = "Gaming"
    music = "Music"
    sports = "Sports"
    news = "News"
    comedy = "Comedy"
    film_animation = "Film & Animation"
    autos_vehicles = "Autos & Vehicles"
    pets_animals = "Pets & Animals"
    travel_events = "Travel & Events"
    howto_style = "Howto & Style"
    science_technology = "Science & Technology"
    nonprofits_activism = "Nonprofits & Activism"
    people_blogs = "People & Blogs"
