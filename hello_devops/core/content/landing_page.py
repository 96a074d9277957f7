"""Static HTML served on the root path."""

LANDING_PAGE_HTML = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Hello DevOps!</title>
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif;
            max-width: 800px;
            margin: 50px auto;
            padding: 20px;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
            text-align: center;
        }
        .container {
            background: rgba(255, 255, 255, 0.1);
            border-radius: 10px;
            padding: 40px;
            backdrop-filter: blur(10px);
        }
        h1 {
            font-size: 3em;
            margin: 0;
        }
        p {
            font-size: 1.2em;
            margin: 20px 0;
        }
        .info {
            margin-top: 30px;
            font-size: 0.9em;
            opacity: 0.8;
        }
    </style>
</head>
<body>
    <div class="container">
        <h1>&#128075; Hello DevOps!</h1>
        <p>Welcome to your first Python web application.</p>
        <p>Start editing and watch the changes happen!</p>
        <div class="info">
            <p>Try these endpoints:</p>
            <p>GET /health - Check if the service is running</p>
            <p>GET /api/message - Get a JSON response</p>
        </div>
    </div>
</body>
</html>
"""
