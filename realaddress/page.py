# page.py
#
# HTML rendering. Templates are rendered with Flask's render_template_string,
# so Jinja autoescaping applies to every value coming from upstream APIs.
# Saved favorites live in the browser's localStorage under one key holding a
# JSON list, newest first.

from flask import render_template_string

from realaddress import config
from realaddress.countries import country_options

PAGE_TEMPLATE = '''
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Real Address Generator</title>
    <style>
        body { font-family: Arial, sans-serif; background-color: #f7fafc; margin: 0; padding: 20px; }
        .container { max-width: 960px; margin: 0 auto; display: grid; grid-template-columns: 1fr 1fr; gap: 24px; }
        .card { background: #fff; border-radius: 12px; padding: 20px; box-shadow: 0 2px 8px rgba(0,0,0,0.1); }
        .row { display: flex; justify-content: space-between; align-items: center; padding: 8px; background: #f9fafb; margin-bottom: 8px; border-radius: 6px; }
        .label { color: #6b7280; }
        .value { font-weight: bold; color: #1f2937; }
        .actions { display: grid; grid-template-columns: 1fr 1fr; gap: 12px; margin-top: 12px; }
        .actions button { padding: 10px; border: none; border-radius: 6px; color: #fff; cursor: pointer; }
        .another { background: #2563eb; }
        .save { background: #22c55e; }
        .saved-entry { border: 1px solid #e5e7eb; border-radius: 6px; padding: 10px; margin-bottom: 8px; }
        #copied-toast { position: fixed; top: 10px; left: 50%; background: #22c55e; color: #fff; padding: 6px 16px; border-radius: 6px; display: none; }
        iframe { width: 100%; height: 250px; border: 0; border-radius: 8px; }
        @media (max-width: 800px) { .container { grid-template-columns: 1fr; } }
    </style>
</head>
<body>
    <div id="copied-toast">Copied!</div>
    <h1 style="text-align: center;">Real Address Generator</h1>
    <div class="container">
        <div class="card">
            <label for="country">Select Country</label>
            <select id="country" onchange="changeCountry(this.value)">
                {% for code, name, selected in options %}
                <option value="{{ code }}"{% if selected %} selected{% endif %}>{{ name }}</option>
                {% endfor %}
            </select>

            <div class="row">
                <span class="label">Name</span>
                <span id="info-name" class="value">{{ identity.name }}</span>
                <button data-copy="{{ identity.name }}" onclick="copyToClipboard(this.dataset.copy)">Copy</button>
            </div>
            <div class="row">
                <span class="label">Gender</span>
                <span id="info-gender" class="value">{{ identity.gender }}</span>
                <button data-copy="{{ identity.gender }}" onclick="copyToClipboard(this.dataset.copy)">Copy</button>
            </div>
            <div class="row">
                <span class="label">Phone</span>
                <span id="info-phone" class="value">{{ identity.phone }}</span>
                <button data-copy="{{ identity.phone_digits }}" onclick="copyToClipboard(this.dataset.copy)">Copy</button>
            </div>
            <div class="row">
                <span class="label">Address</span>
                <span id="info-address" class="value">{{ identity.address }}</span>
                <button data-copy="{{ identity.address }}" onclick="copyToClipboard(this.dataset.copy)">Copy</button>
            </div>

            <iframe src="https://www.google.com/maps?q={{ identity.address|urlencode }}&output=embed"></iframe>

            <div class="actions">
                <button class="another" onclick="changeCountry(document.getElementById('country').value)">Get Another Address</button>
                <button class="save" onclick="saveAddress()">Save Address</button>
            </div>
        </div>

        <div class="card">
            <h2>Saved Addresses</h2>
            <div id="savedAddressesContainer"></div>
        </div>
    </div>

    <script>
        const STORAGE_KEY = {{ storage_key|tojson }};

        function loadSaved() {
            return JSON.parse(localStorage.getItem(STORAGE_KEY) || '[]');
        }

        function storeSaved(entries) {
            localStorage.setItem(STORAGE_KEY, JSON.stringify(entries));
        }

        function copyToClipboard(text) {
            navigator.clipboard.writeText(text).then(() => {
                const toast = document.getElementById('copied-toast');
                toast.style.display = 'block';
                setTimeout(() => { toast.style.display = 'none'; }, 2000);
            }).catch(err => console.error('Could not copy text: ', err));
        }

        function changeCountry(country) {
            window.location.href = window.location.pathname + '?country=' + encodeURIComponent(country);
        }

        function saveAddress() {
            const note = prompt('Please enter a note (optional)', '');
            try {
                const saved = loadSaved();
                saved.unshift({
                    note: note || 'No notes',
                    name: document.getElementById('info-name').textContent,
                    gender: document.getElementById('info-gender').textContent,
                    phone: document.getElementById('info-phone').textContent,
                    address: document.getElementById('info-address').textContent
                });
                storeSaved(saved);
                renderSavedAddresses();
            } catch (e) {
                console.error('Could not save address to localStorage', e);
                alert('Error: Could not save address. Your browser might be blocking localStorage.');
            }
        }

        function deleteAddress(index) {
            try {
                const saved = loadSaved();
                saved.splice(index, 1);
                storeSaved(saved);
                renderSavedAddresses();
            } catch (e) {
                console.error('Could not delete address from localStorage', e);
            }
        }

        function textLine(label, value) {
            const p = document.createElement('p');
            p.textContent = label + ': ' + value;
            return p;
        }

        function renderSavedAddresses() {
            const container = document.getElementById('savedAddressesContainer');
            container.replaceChildren();
            let saved;
            try {
                saved = loadSaved();
            } catch (e) {
                console.error('Could not render saved addresses from localStorage', e);
                return;
            }
            if (saved.length === 0) {
                container.appendChild(textLine('Saved', 'none yet'));
                return;
            }
            saved.forEach((entry, index) => {
                const card = document.createElement('div');
                card.className = 'saved-entry';
                const title = document.createElement('strong');
                title.textContent = entry.note;
                const remove = document.createElement('button');
                remove.textContent = 'Delete';
                remove.onclick = () => deleteAddress(index);
                card.append(title, remove,
                    textLine('Name', entry.name),
                    textLine('Gender', entry.gender),
                    textLine('Phone', entry.phone),
                    textLine('Address', entry.address));
                container.appendChild(card);
            });
        }

        window.onload = renderSavedAddresses;
    </script>
</body>
</html>
'''

ERROR_TEMPLATE = '''
<div style="font-family: sans-serif; text-align: center; padding: 40px;">
    <h1>Oops! Something went wrong.</h1>
    <p>We couldn't generate an address right now. Please try refreshing the page.</p>
    <p style="color: grey; font-size: 0.8em;">Error: {{ message }}</p>
</div>
'''


def render_identity_page(identity) -> str:
    """Renders the generator page for an Identity. Needs an app context."""
    return render_template_string(
        PAGE_TEMPLATE,
        identity=identity,
        options=country_options(identity.country),
        storage_key=config.SAVED_ADDRESSES_KEY,
    )


def render_error_page(message: str) -> str:
    return render_template_string(ERROR_TEMPLATE, message=message)
