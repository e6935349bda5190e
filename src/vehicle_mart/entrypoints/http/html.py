"""HTML rendering of the results grid.

Card fields arrive already escaped from the presenter and are embedded as-is.
"""

from __future__ import annotations

from vehicle_mart.use_cases.present_vehicles import CatalogNotice, CatalogView, VehicleCard


def render_notice(notice: CatalogNotice) -> str:
    return f'<div class="col-12 text-center text-{notice.tone}">{notice.message}</div>'


def render_card(card: VehicleCard) -> str:
    # onerror clears itself first so a broken placeholder is not retried
    return f"""<div class="col-md-4 mb-4">
  <div class="blog_box h-100 d-flex flex-column">
    <div class="blog_img">
      <img src="{card.image_src}" alt="{card.image_alt}" onerror="this.onerror=null;this.src='{card.fallback_image_src}'">
    </div>
    <div class="btn_main">
      <div class="date_text"><a href="#">{card.price}</a></div>
    </div>
    <h3 class="blog_text">{card.heading}</h3>
    <p class="lorem_text">{card.summary}</p>
    <ul class="list-unstyled mt-2 small">
      <li><strong>Model Code:</strong> {card.model_code}</li>
      <li><strong>Engine:</strong> {card.engine}</li>
    </ul>
    <div class="mt-auto read_bt">
      <a href="{card.detail_href}">View Details
        <span class="arrow_icon"><i class="fa fa-long-arrow-right" aria-hidden="true"></i></span>
      </a>
    </div>
  </div>
</div>"""


def render_catalog_grid(view: CatalogView) -> str:
    """Contents of the results grid: either one notice or the cards in order."""
    if view.notice is not None:
        return render_notice(view.notice)
    return "\n".join(render_card(card) for card in view.cards)
