# Routes package init
"""
Notebox - API Routes Package
============================

Route Inventory:
    - notes.py:   GET    /notes            (list all notes)
                  GET    /notes/{name}     (note text)
                  PUT    /notes/{name}     (replace text)
                  DELETE /notes/{name}     (remove note)
    - form.py:    POST   /write            (create from form fields)
                  GET    /UploadForm.html  (static HTML form)
    - health.py:  GET    /health           (store health check)

Routes stay thin: extract request data, call a service, pick the status.
"""
