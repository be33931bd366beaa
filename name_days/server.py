from flask import Flask, request, jsonify

from name_days.resolver import get_calendar, resolve
from name_days.triggers import strip_trigger

app = Flask(__name__)


def _answer_response(query, result):
    if result is None:
        return jsonify({'error': 'no answer', 'query': query}), 404
    return jsonify({'query': query, 'answer': result})


@app.route('/api/nameday', methods=['GET'])
def api_nameday():
    query = request.args.get('q')
    if not query or not query.strip():
        return jsonify({'error': 'q required'}), 400
    return _answer_response(query, resolve(get_calendar(), query))


@app.route('/api/answer', methods=['GET'])
def api_answer():
    text = request.args.get('text')
    if not text or not text.strip():
        return jsonify({'error': 'text required'}), 400
    remainder = strip_trigger(text)
    if remainder is None:
        return _answer_response(text, None)
    return _answer_response(remainder, resolve(get_calendar(), remainder))


if __name__ == "__main__":
    # fail at startup rather than on the first request if the data is broken
    get_calendar()
    app.run(host="127.0.0.1", port=5000, debug=True)
