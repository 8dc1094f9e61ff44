import os

from flask import Flask, render_template, request, redirect, url_for, flash

from weather_app.config import API_KEY_VAR, FAV_FILE, load_local_env
from weather_app.services import (
    OpenWeatherService,
    FavouritesStore,
    FavouritesError,
    WeatherServiceError,
)

app = Flask(__name__)
# Needed for flashing messages (error handling)
app.secret_key = os.urandom(24)


def get_service():
    """Build the API client, or return None when no key is configured."""
    load_local_env()
    api_key = os.environ.get(API_KEY_VAR)
    if not api_key:
        return None
    return OpenWeatherService(api_key)


def get_store():
    return FavouritesStore(app.config.get("FAV_FILE", FAV_FILE)).load()


@app.route("/", methods=["GET", "POST"])
def index():
    service = get_service()
    store = get_store()
    if service is None:
        flash(f"Set {API_KEY_VAR} to look up the weather.", "error")
        return render_template("index.html", report=None, favourites=[], query="")

    report = None
    query = ""
    if request.method == "POST":
        query = request.form.get("city", "").strip()
        if not query:
            flash("Please enter a city.", "error")
            return redirect(url_for("index"))
        try:
            app.logger.info("Searching weather for %s", query)
            report = service.fetch_weather(query)
        except WeatherServiceError as exc:
            flash(str(exc), "error")

    # ------------------------------------------------------------------
    # Favourites with their current weather
    # ------------------------------------------------------------------
    favourites = []
    for city, result in service.fetch_many(store):
        if isinstance(result, Exception):
            favourites.append({"name": city, "report": None})
        else:
            favourites.append({"name": city, "report": result})

    return render_template(
        "index.html", report=report, favourites=favourites, query=query
    )


@app.route("/favourites", methods=["POST"])
def add_favourite():
    city = request.form.get("city", "").strip()
    if not city:
        flash("Please enter a city.", "error")
        return redirect(url_for("index"))

    service = get_service()
    if service is None:
        flash(f"Set {API_KEY_VAR} to look up the weather.", "error")
        return redirect(url_for("index"))

    store = get_store()
    try:
        store.check_can_add(city)
        service.fetch_weather(city)
        store.add(city)
    except (FavouritesError, WeatherServiceError) as exc:
        flash(str(exc), "error")
    else:
        flash(f'Added "{city}"', "info")
    return redirect(url_for("index"))


@app.route("/favourites/<city>/delete", methods=["POST"])
def remove_favourite(city):
    try:
        get_store().remove(city)
    except FavouritesError as exc:
        flash(str(exc), "error")
    else:
        flash(f'Removed "{city}"', "info")
    return redirect(url_for("index"))


if __name__ == "__main__":
    # For development only – use a proper WSGI server in production
    app.run(debug=True, host="0.0.0.0", port=5000)
