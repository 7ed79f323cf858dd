"""Browser walkthrough of a running app (streamlit run app.py).

Start -> main -> pig -> cat -> back, taking a screenshot at each step.
"""
import os
import sys
import time

from playwright.sync_api import sync_playwright, expect

BASE_URL = "http://localhost:8501"
OUT_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "verification")


def run_verification(base_url: str = BASE_URL):
    os.makedirs(OUT_DIR, exist_ok=True)
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True)
        page = browser.new_page()

        page.goto(base_url)
        page.wait_for_selector("text='Go to Main View'")
        expect(page.get_by_text("Welcome to the Animal Farm")).to_be_visible()
        page.screenshot(path=os.path.join(OUT_DIR, "01_start.png"))

        page.get_by_role("button", name="Go to Main View").click()
        expect(page.get_by_role("button", name="Pig")).to_be_visible()
        expect(page.get_by_text("You are currently watching")).not_to_be_visible()

        for n, animal in enumerate(["pig", "cat"], start=2):
            page.get_by_role("button", name=animal.capitalize()).click()
            expect(page.get_by_text(f"You are currently watching a {animal}")).to_be_visible()
            expect(page.get_by_text(f"And {animal} is watching you back")).to_be_visible()
            page.wait_for_load_state('networkidle')
            page.screenshot(path=os.path.join(OUT_DIR, f"0{n}_{animal}.png"))

        page.get_by_role("button", name="Go back to the start").click()
        expect(page.get_by_role("button", name="Go to Main View")).to_be_visible()

        # deep link straight to an animal
        page.goto(f"{base_url}/?view=main/cat")
        expect(page.get_by_text("You are currently watching a cat")).to_be_visible()
        page.screenshot(path=os.path.join(OUT_DIR, "04_deep_link.png"))

        browser.close()


if __name__ == "__main__":
    time.sleep(int(sys.argv[1]) if len(sys.argv) > 1 else 0)  # give streamlit time to start
    run_verification()
