http200 = 200
http201 = 201
http400 = 400
http404 = 404
http500 = 500
