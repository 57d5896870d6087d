from typing import Any, Dict, List

from flask import render_template_string

from ..models.chart import ChartPoint
from ..models.session import SessionSnapshot
from ..services.charts.chart_data import fats_series, nutrition_series
from ..utils.helpers import format_number

# Seconds between page reloads while an analysis is running
POLL_INTERVAL_S = 2

FOOD_CATEGORIES = ["Fruits", "Vegetables", "Proteins", "Grains"]

HOW_IT_WORKS = [
    ("Upload Photo", "Take a clear photo of your meal or snack"),
    ("AI Analysis", "Our AI identifies ingredients and analyzes nutrition"),
    ("Get Insights", "Receive nutritional data and personalized recommendations"),
]

POPULAR_CATEGORIES = [
    ("Fresh Salads", "Low calorie, high nutrients"),
    ("Protein Rich", "Excellent for muscle growth"),
    ("Omega-3 Foods", "Great for heart health"),
    ("Sweet Treats", "Moderation is key"),
]

RECOMMENDATIONS = [
    ("Complementary Foods", "Consider pairing with leafy greens for added nutrients"),
    ("Dietary Context", "This meal fits well in a balanced Mediterranean diet"),
    ("Portion Advice", "Standard portion provides 30% of daily recommended protein"),
]

NO_WARNINGS_TEXT = "No specific warnings for this food."

PAGE_HTML = """<!doctype html>
<html>
  <head>
    <meta charset="utf-8">
    <title>EatAlyzer</title>
    {% if snap.is_loading %}<meta http-equiv="refresh" content="{{ poll_interval }}">{% endif %}
    <style>
      body { font-family: system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif; background: #ecfdf5; margin: 0; padding: 24px; color: #1f2937 }
      .wrap { max-width: 1100px; margin: auto; background: #fff; border-radius: 16px; overflow: hidden; box-shadow: 0 10px 25px rgba(0,0,0,.08) }
      header { text-align: center; padding: 32px 16px 8px }
      header h1 { color: #166534; font-size: 44px; margin: 0 }
      .upload { display: flex; gap: 24px; padding: 24px; background: linear-gradient(90deg, #16a34a, #10b981); color: #fff; flex-wrap: wrap }
      .upload form { margin-bottom: 12px }
      .preview { width: 320px; height: 320px; border-radius: 12px; background: rgba(0,0,0,.1); display: flex; align-items: center; justify-content: center; overflow: hidden }
      .preview img { width: 100%; height: 100%; object-fit: cover }
      button { height: 48px; padding: 0 20px; border: 0; border-radius: 8px; color: #166534; font-weight: 600; cursor: pointer }
      button:disabled { opacity: .5; cursor: not-allowed }
      .error { background: #fef2f2; border-left: 4px solid #ef4444; color: #b91c1c; margin: 24px; padding: 12px 16px }
      .section { padding: 24px; background: #f0fdf4 }
      .cards { display: grid; grid-template-columns: repeat(auto-fit, minmax(220px, 1fr)); gap: 16px; margin-bottom: 16px }
      .card { background: #fff; border: 1px solid #dcfce7; border-radius: 12px; padding: 16px }
      .card h3, .card h4 { color: #166534; margin-top: 0 }
      .calories { font-size: 48px; font-weight: 700; color: #16a34a }
      .healthy { color: #16a34a; font-weight: 600 }
      .alert { color: #d97706; font-weight: 600 }
      .chip { display: inline-block; padding: 4px 12px; margin: 2px; background: #dcfce7; color: #166534; border-radius: 999px; font-size: 14px }
      .bar-row { display: flex; align-items: center; gap: 8px; margin: 6px 0 }
      .bar-label { width: 90px; font-size: 14px }
      .bar-track { flex: 1; background: #f3f4f6; border-radius: 4px; height: 18px }
      .bar { height: 18px; border-radius: 0 4px 4px 0 }
      .bar-value { width: 60px; font-size: 13px; text-align: right }
      footer { background: #166534; color: #dcfce7; padding: 24px; font-size: 14px }
    </style>
  </head>
  <body>
    <div class="wrap">
      <header>
        <h1>EatAlyzer</h1>
        <p>Advanced food analysis that provides detailed nutritional information and personalized health insights from your meal photos</p>
        <p>{% for name in food_categories %}<span class="chip">{{ name }}</span>{% endfor %}</p>
      </header>

      <div class="upload">
        <div style="flex: 1">
          <h2>Analyze Your Meal</h2>
          <p>Take a photo of your meal to get instant nutritional insights and personalized health recommendations.</p>
          <form method="POST" action="{{ url_for('analysis.select_file') }}" enctype="multipart/form-data">
            <input type="file" name="image" accept="image/*" required>
            <button type="submit">Select</button>
            <div>{{ snap.filename or 'Select a food image' }}</div>
          </form>
          <form method="POST" action="{{ url_for('analysis.analyze') }}">
            <button type="submit" id="analyze" {% if not snap.has_file or snap.is_loading %}disabled{% endif %}>
              {% if snap.is_loading %}Analyzing your meal...{% else %}Get Nutritional Analysis{% endif %}
            </button>
          </form>
        </div>
        <div class="preview">
          {% if snap.preview_encoding %}
            <img src="{{ snap.preview_encoding }}" alt="Food preview">
          {% else %}
            <p>Your meal image will appear here</p>
          {% endif %}
        </div>
      </div>

      {% if snap.error_message %}
      <div class="error" role="alert">{{ snap.error_message }}</div>
      {% endif %}

      {% if not result and not snap.is_loading %}
      <div class="section" id="how-it-works">
        <h3>How it works</h3>
        <div class="cards">
          {% for title, text in how_it_works %}
          <div class="card"><h4>{{ title }}</h4><p>{{ text }}</p></div>
          {% endfor %}
        </div>
        <div class="card">
          <h3>Popular Food Categories</h3>
          <div class="cards">
            {% for title, text in popular_categories %}
            <div class="card"><h4>{{ title }}</h4><p>{{ text }}</p></div>
            {% endfor %}
          </div>
        </div>
      </div>
      {% endif %}

      {% if result %}
      <div class="section" id="results">
        <h2>Analysis Results</h2>
        <div class="cards">
          <div class="card">
            <h3>Calorie Estimate</h3>
            <span class="calories">{{ fmt(result.calories) }}</span> calories
            <p>Based on identified ingredients and portion size</p>
          </div>
          <div class="card">
            <h3>Health Assessment</h3>
            {% if result.health_assessment.is_healthy %}
              <span class="healthy">Healthy Choice</span>
            {% else %}
              <span class="alert">Nutrition Alert</span>
            {% endif %}
            <p>{{ result.health_assessment.recommended_consumption }}</p>
          </div>
        </div>

        <div class="cards">
          <div class="card">
            <h3>Detected Ingredients</h3>
            {% for item in result.contents %}<span class="chip">{{ item }}</span>{% endfor %}
          </div>
          <div class="card" id="nutrition-chart">
            <h3>Nutritional Breakdown</h3>
            {% for row in nutrition_rows %}
            <div class="bar-row" title="{{ row.value }}g">
              <span class="bar-label">{{ row.label }}</span>
              <div class="bar-track"><div class="bar" style="width: {{ row.percent }}%; background: {{ row.fill }}"></div></div>
              <span class="bar-value">{{ row.value }}g</span>
            </div>
            {% endfor %}
          </div>
        </div>

        <div class="cards">
          <div class="card" id="fats-chart">
            <h3>Fats Breakdown</h3>
            {% for row in fats_rows %}
            <div class="bar-row" title="{{ row.value }}g">
              <span class="bar-label">{{ row.label }}</span>
              <div class="bar-track"><div class="bar" style="width: {{ row.percent }}%; background: {{ row.fill }}"></div></div>
              <span class="bar-value">{{ row.value }}g</span>
            </div>
            {% endfor %}
          </div>
          <div class="card" id="benefits">
            <h3>Health Benefits</h3>
            <ul>{% for benefit in result.health_assessment.benefits %}<li>{{ benefit }}</li>{% endfor %}</ul>
          </div>
          <div class="card" id="warnings">
            <h3>Health Considerations</h3>
            {% if result.health_assessment.warnings %}
              <ul>{% for warning in result.health_assessment.warnings %}<li>{{ warning }}</li>{% endfor %}</ul>
            {% else %}
              <p>{{ no_warnings_text }}</p>
            {% endif %}
          </div>
        </div>

        <div class="card">
          <h3>Personalized Recommendations</h3>
          <div class="cards">
            {% for title, text in recommendations %}
            <div class="card"><h4>{{ title }}</h4><p>{{ text }}</p></div>
            {% endfor %}
          </div>
        </div>
      </div>
      {% endif %}

      <footer>
        <h4>EatAlyzer</h4>
        <p>Advanced food analysis powered by artificial intelligence. Get detailed nutritional insights from your food photos in seconds.</p>
        <h4>Important Note</h4>
        <p>Analysis is an estimate based on visual identification. Results may vary. Not a substitute for professional dietary or medical advice.</p>
        <p>&copy; {{ year }} EatAlyzer &bull; All analysis is provided for informational purposes only</p>
      </footer>
    </div>
  </body>
</html>"""


def build_chart_rows(series: List[ChartPoint]) -> List[Dict[str, Any]]:
    """Bar rows sized relative to the largest value in the series"""
    peak = max((p.value for p in series), default=0)
    rows = []
    for p in series:
        percent = round(p.value / peak * 100.0, 1) if peak > 0 else 0
        rows.append({
            "label": p.label,
            "value": format_number(p.value),
            "fill": p.fill,
            "percent": max(0, percent),
        })
    return rows


def render_page(snap: SessionSnapshot, year: int) -> str:
    """Render the full page for one session snapshot. Needs a Flask request context."""
    return render_template_string(
        PAGE_HTML,
        snap=snap,
        result=snap.result,
        nutrition_rows=build_chart_rows(nutrition_series(snap.result)),
        fats_rows=build_chart_rows(fats_series(snap.result)),
        food_categories=FOOD_CATEGORIES,
        how_it_works=HOW_IT_WORKS,
        popular_categories=POPULAR_CATEGORIES,
        recommendations=RECOMMENDATIONS,
        no_warnings_text=NO_WARNINGS_TEXT,
        poll_interval=POLL_INTERVAL_S,
        fmt=format_number,
        year=year,
    )
