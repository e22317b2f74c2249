"""
Etsy Listing Viewer page

A single HTML form: paste an Etsy listing URL, get the listing's title, image,
price, quantity and description back. The details come from the
listing-details endpoint configured by ``LISTING_DETAILS_URL``; this app only
validates the URL and renders whatever that endpoint returns.

The description is rendered as raw markup, exactly as the endpoint sends it.
"""

from flask import Flask, render_template_string, request

from .config import Settings, setup_logging
from .viewer import ListingViewer

app = Flask(__name__)
settings = Settings.from_env()

PAGE = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Etsy Listing Viewer</title>
  <style>
    body { font-family: sans-serif; max-width: 48rem; margin: 2rem auto; }
    form { display: flex; gap: .5rem; margin-bottom: 1.5rem; }
    input[type=text] { flex-grow: 1; padding: .5rem; }
    button { padding: .5rem 1.25rem; background: #f97316; color: #fff; border: 0; }
    button:disabled { background: #9ca3af; cursor: not-allowed; }
    .error { padding: .75rem; border: 1px solid #f87171; background: #fee2e2; color: #b91c1c; }
    .listing img { display: block; max-width: 24rem; margin: 0 auto 1rem; }
    .description { white-space: pre-line; }
  </style>
</head>
<body>
  <h1>Etsy Listing Viewer</h1>
  <form method="post" action="{{ url_for('index') }}">
    <input type="text" name="url" value="{{ viewer.url }}"
           placeholder="Paste Etsy Listing URL here" required>
    <button type="submit"{% if viewer.is_loading %} disabled{% endif %}>
      {{ "Loading..." if viewer.is_loading else "Get Details" }}
    </button>
  </form>

  {% if viewer.error %}
  <div class="error" role="alert">{{ viewer.error }}</div>
  {% endif %}

  {% if viewer.listing %}
  {% set listing = viewer.listing %}
  <div class="listing">
    <h2>{{ listing.title }}</h2>
    {% if listing.images %}
    <img src="{{ listing.first_image_url }}" alt="{{ listing.title }}">
    {% endif %}
    <p class="price"><strong>Price:</strong> {{ listing.price_amount }} {{ listing.currency_code }}</p>
    <p class="quantity"><strong>Quantity Available:</strong> {{ listing.quantity }}</p>
    <div>
      <strong>Description:</strong>
      <div class="description">{{ listing.description|safe }}</div>
    </div>
    <p><a{% if listing.url %} href="{{ listing.url }}"{% endif %} target="_blank" rel="noopener noreferrer">View on Etsy &rarr;</a></p>
  </div>
  {% endif %}
</body>
</html>
"""


def make_viewer() -> ListingViewer:
    return ListingViewer(
        settings.listing_details_url,
        timeout=settings.listing_details_timeout,
    )


@app.route("/", methods=["GET", "POST"])
def index():
    viewer = make_viewer()
    if request.method == "POST":
        viewer.submit(request.form.get("url", ""))
    return render_template_string(PAGE, viewer=viewer)


def main() -> None:
    setup_logging(settings.log_level)
    app.run(host=settings.host, port=settings.frontend_port)


if __name__ == "__main__":
    main()
