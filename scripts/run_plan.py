import requests, json, sys

strategy = "optimized"
if len(sys.argv) > 1:
    strategy = sys.argv[1]

resp = requests.post("http://127.0.0.1:8000/plan", json={"strategy": strategy, "write_outputs": True})
body = resp.json()
body.pop("order", None)  # keep the terminal readable
print(json.dumps(body, indent=2))
